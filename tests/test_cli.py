"""Tests for the rkmatch command line."""
import pytest

from rkmatch.cli import build_parser, main


@pytest.fixture
def zero_docs(write_doc, zeros40):
    return write_doc("query.bin", zeros40), write_doc("target.bin", zeros40)


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["q", "t"])
        assert args.algorithm == 1
        assert args.chunk_size == 20
        assert args.modulus is None
        assert args.targets == ["t"]

    def test_multiple_targets(self):
        args = build_parser().parse_args(["-t", "3", "q", "t1", "t2"])
        assert args.targets == ["t1", "t2"]


class TestMain:
    def test_exact_match(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-t", "0", str(q), str(t)]) == 0
        assert capsys.readouterr().out == "Exact match\n"

    def test_not_exact(self, write_doc, capsys):
        q = write_doc("q.txt", b"Hello   World")
        t = write_doc("t.txt", b"hello world!")
        assert main(["-t", "0", str(q), str(t)]) == 0
        assert capsys.readouterr().out == "Not an exact match\n"

    def test_exact_after_normalization(self, write_doc, capsys):
        q = write_doc("q.txt", b"  Hello \n\n World ")
        t = write_doc("t.txt", b"hello world")
        main(["-t", "0", str(q), str(t)])
        assert capsys.readouterr().out == "Exact match\n"

    def test_naive(self, zero_docs, capsys):
        q, t = zero_docs
        assert main([str(q), str(t)]) == 0
        assert capsys.readouterr().out == "2 chunks matched (out of 2), percentage: 1.00\n"

    def test_rabin_karp_diagnostics(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-t", "2", str(q), str(t)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "0",
            "0 0 0 0 0",
            "0",
            "0 0 0 0 0",
            "2 chunks matched (out of 2), percentage: 1.00",
        ]

    def test_batch(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-t", "3", str(q), str(t)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "64 20",
            "21 chunks matched (out of 2), percentage: 10.50",
        ]

    def test_batch_verify(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-t", "3", "--verify", str(q), str(t)]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == (
            "2 chunks matched (out of 2), percentage: 1.00"
        )

    def test_modulus_override(self, write_doc, capsys):
        q = write_doc("q.txt", b"abcd")
        t = write_doc("t.txt", b"abcde")
        assert main(["-t", "2", "-k", "4", "-q", "1000003", str(q), str(t)]) == 0
        lines = capsys.readouterr().out.splitlines()
        expected = (97 * 256**3 + 98 * 256**2 + 99 * 256 + 100) % 1000003
        assert lines[0] == str(expected)
        assert lines[1].split()[0] == str(expected)

    def test_several_targets(self, write_doc, zeros40, capsys):
        q = write_doc("q.bin", zeros40)
        t1 = write_doc("t1.bin", zeros40)
        t2 = write_doc("t2.txt", b"nothing in common with the zero bytes here")
        assert main([str(q), str(t1), str(t2)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            f"== {t1} ==",
            "2 chunks matched (out of 2), percentage: 1.00",
            f"== {t2} ==",
            "0 chunks matched (out of 2), percentage: 0.00",
        ]


class TestErrors:
    def test_bad_algorithm(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-t", "9", str(q), str(t)]) == 1
        assert "wrong algorithm type" in capsys.readouterr().err

    def test_bad_chunk_size(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-k", "0", str(q), str(t)]) == 1
        assert "chunk size" in capsys.readouterr().err

    def test_chunk_larger_than_query(self, zero_docs):
        q, t = zero_docs
        assert main(["-t", "3", "-k", "41", str(q), str(t)]) == 1

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "a"), str(tmp_path / "b")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_missing_arguments(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().err

    def test_non_integer_k(self, zero_docs):
        q, t = zero_docs
        assert main(["-k", "abc", str(q), str(t)]) == 1

    def test_modulus_overflow(self, zero_docs, capsys):
        q, t = zero_docs
        assert main(["-q", str(1 << 60), str(q), str(t)]) == 1
        assert "64 bits" in capsys.readouterr().err


class TestNoPartialOutput:
    def test_short_second_target(self, write_doc, zeros40, capsys):
        q = write_doc("q.bin", zeros40)
        t1 = write_doc("t1.bin", zeros40)
        t2 = write_doc("t2.bin", bytes(10))
        assert main(["-t", "3", str(q), str(t1), str(t2)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "exceeds target length" in captured.err

    def test_missing_second_target(self, write_doc, zeros40, tmp_path, capsys):
        q = write_doc("q.bin", zeros40)
        t1 = write_doc("t1.bin", zeros40)
        assert main([str(q), str(t1), str(tmp_path / "gone.bin")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "cannot read" in captured.err

    def test_exact_mode_skips_chunk_check(self, write_doc, capsys):
        q = write_doc("q.txt", b"abc")
        t = write_doc("t.txt", b"abc")
        assert main(["-t", "0", str(q), str(t)]) == 0
        assert capsys.readouterr().out == "Exact match\n"

from rkmatch.match.batch import BatchMatchResult, batch_match
from rkmatch.match.chunks import chunk_count, iter_chunks, validate_chunk_size
from rkmatch.match.exact import exact_match
from rkmatch.match.naive import naive_chunks, simple_substr_match
from rkmatch.match.rabin_karp import rabin_karp_chunks, rabin_karp_match, trace_hashes

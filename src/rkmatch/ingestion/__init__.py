from rkmatch.ingestion.loader import load_normalized, normalize, read_document

"""
Integration tests for the document text extraction Lambda.

These tests run the handler end to end against moto-backed S3
with Document AI replaced by an in-memory extractor.
"""

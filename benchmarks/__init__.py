"""
Benchmark suite for json_parse throughput.

Compares json_parse.parse against the standard library json module and the
C-backed orjson and ujson decoders on the same generated documents.
"""

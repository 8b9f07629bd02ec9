"""
Wire - the generic JSON-RPC call pipeline.

- params:    positional parameter descriptors and marshaling
- envelope:  request encoding, response decoding and classification
- transport: httpx POST with Basic authentication
"""

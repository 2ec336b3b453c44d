import brotli
import gzip
import io
import json
import unittest

import ijson

from resreader import DecodingError, InvalidInputError, StreamDecompressor
from resreader.stream_decompressor import stream_for
from response_stub import ResponseStub, StubBody

PAYLOAD = json.dumps({
    "items": [{"name": "first", "enabled": True}],
    "links": [],
    "meta": [{"name": "page", "value": {"x": 1}}],
}).encode("utf-8")


class TestStreamDecompressor(unittest.TestCase):

    def _keys(self, stream):
        keys = []
        for k, _v in ijson.kvitems(stream, ""):
            keys.append(k)
        return keys

    def test_plain(self):
        response = ResponseStub(StubBody(PAYLOAD))
        stream = stream_for(response)

        self.assertIs(stream, response.raw)
        keys = self._keys(stream)
        self.assertIn("items", keys)
        self.assertIn("links", keys)
        self.assertIn("meta", keys)

    def test_gzip(self):
        stream = stream_for(ResponseStub(StubBody(gzip.compress(PAYLOAD)), encoding="gzip"))

        self.assertIsInstance(stream, StreamDecompressor)
        keys = self._keys(stream)
        self.assertIn("items", keys)
        self.assertIn("meta", keys)

    def test_brotli(self):
        stream = stream_for(ResponseStub(StubBody(brotli.compress(PAYLOAD)), encoding="br"))

        self.assertIsInstance(stream, StreamDecompressor)
        keys = self._keys(stream)
        self.assertIn("items", keys)
        self.assertIn("meta", keys)

    def test_encoding_header_is_case_insensitive(self):
        response = ResponseStub(StubBody(gzip.compress(PAYLOAD)))
        response.headers = {"Content-Encoding": " GZIP "}

        self.assertEqual(stream_for(response).read(), PAYLOAD)

    def test_unknown_encodings_pass_through(self):
        for encoding in ["deflate", "identity", "compress", "gzip, br", ""]:
            response = ResponseStub(StubBody(b"opaque"), encoding=encoding)
            self.assertIs(stream_for(response), response.raw, encoding)

    def test_missing_headers_pass_through(self):
        response = ResponseStub(StubBody(b"opaque"))
        response.headers = None

        self.assertIs(stream_for(response), response.raw)

    def test_construction_is_lazy(self):
        for encoding in ["gzip", "br"]:
            body = StubBody(b"not compressed at all")
            stream_for(ResponseStub(body, encoding=encoding))
            self.assertEqual(body.read_calls, 0, encoding)

    def test_invalid_input(self):
        with self.assertRaises(InvalidInputError) as context:
            stream_for(None)
        self.assertIn("response", str(context.exception))

        with self.assertRaises(InvalidInputError) as context:
            stream_for(ResponseStub(None, encoding="gzip"))
        self.assertIn("body", str(context.exception))

    def test_bad_gzip_header(self):
        stream = stream_for(ResponseStub(StubBody(b"\x00\x01 definitely not gzip"), encoding="gzip"))

        with self.assertRaises(DecodingError) as context:
            stream.read()
        self.assertIsNotNone(context.exception.__cause__)

    def test_truncated_gzip(self):
        compressed = gzip.compress(PAYLOAD)
        stream = StreamDecompressor(io.BytesIO(compressed[:len(compressed) // 2]), "gzip")

        with self.assertRaises(DecodingError):
            stream.read()

    def test_bad_brotli(self):
        stream = StreamDecompressor(io.BytesIO(b"\x11" * 16), "br")

        with self.assertRaises(DecodingError):
            stream.read()

    def test_truncated_brotli(self):
        compressed = brotli.compress(PAYLOAD)
        stream = StreamDecompressor(io.BytesIO(compressed[:len(compressed) // 2]), "br")

        with self.assertRaises(DecodingError):
            stream.read()

    def test_brotli_sized_reads(self):
        data = b"0123456789" * 5000
        stream = StreamDecompressor(io.BytesIO(brotli.compress(data)), "br")

        self.assertEqual(stream.read(0), b"")
        chunks = []
        while True:
            chunk = stream.read(7)
            if not chunk:
                break
            self.assertLessEqual(len(chunk), 7)
            chunks.append(chunk)
        self.assertEqual(b"".join(chunks), data)

    def test_close_does_not_close_body(self):
        for encoding in ["gzip", "br"]:
            body = StubBody(gzip.compress(PAYLOAD) if encoding == "gzip" else brotli.compress(PAYLOAD))
            with StreamDecompressor(body, encoding) as stream:
                stream.read(10)
            self.assertTrue(stream.closed)
            self.assertEqual(body.close_calls, 0, encoding)
            with self.assertRaises(ValueError):
                stream.read()

    def test_unsupported_encoding(self):
        with self.assertRaises(DecodingError):
            StreamDecompressor(io.BytesIO(b""), "deflate")


if __name__ == "__main__":
    unittest.main()

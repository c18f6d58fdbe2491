import unittest
from io import BytesIO

from grincodec.bitstreams import BitOutputStream, BitInputStream, END_OF_STREAM


class TestBitOutputStream(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bits = [1, 0, 1, 0, 1, 0, 1, 0]
        for bit in bits:
            bos.write_bit(bit)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in [1, 0, 1]:
            bos.write_bit(bit)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10100000]))

    def test_write_bits_msb_first(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(0xFACEB00C, 32)
        bos.write_bits(256, 9)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0xFA, 0xCE, 0xB0, 0x0C, 0x80, 0x00]))
        self.assertEqual(bos.bits_written, 41)

    def test_write_bits_rejects_wide_values(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write_bits(512, 9)
        with self.assertRaises(ValueError):
            bos.write_bits(-1, 9)

    def test_invalid_bit_write(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write_bit(2)

    def test_context_manager_flushes_on_error(self):
        out = BytesIO()
        with self.assertRaises(RuntimeError):
            with BitOutputStream(out) as bos:
                bos.write_code((1, 1))
                raise RuntimeError("boom")
        self.assertEqual(out.getvalue(), bytes([0b11000000]))

    def test_close_closes_underlying_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bit(1)
        bos.close()
        self.assertTrue(out.closed)
        bos.close()


class TestBitInputStream(unittest.TestCase):
    def test_bit_input_stream(self):
        bis = BitInputStream(BytesIO(bytes([0b11001010])))
        bits = [bis.read_bit() for _ in range(8)]
        self.assertEqual(bits, [1, 1, 0, 0, 1, 0, 1, 0])
        self.assertEqual(bis.read_bit(), END_OF_STREAM)

    def test_read_bits(self):
        bis = BitInputStream(BytesIO(bytes([0xFA, 0xCE, 0xB0, 0x0C, 0x80, 0x00])))
        self.assertEqual(bis.read_bits(32), 0xFACEB00C)
        self.assertEqual(bis.read_bits(9), 256)
        self.assertEqual(bis.bits_read, 41)

    def test_read_bits_past_end(self):
        bis = BitInputStream(BytesIO(bytes([0xFF])))
        self.assertEqual(bis.read_bits(9), END_OF_STREAM)

    def test_has_more_bits_includes_padding(self):
        bis = BitInputStream(BytesIO(bytes([0x80])))
        self.assertTrue(bis.has_more_bits())
        self.assertEqual(bis.read_bit(), 1)
        for _ in range(7):
            self.assertTrue(bis.has_more_bits())
            self.assertEqual(bis.read_bit(), 0)
        self.assertFalse(bis.has_more_bits())
        self.assertEqual(bis.read_bit(), END_OF_STREAM)

    def test_empty_stream(self):
        bis = BitInputStream(BytesIO(b""))
        self.assertFalse(bis.has_more_bits())
        self.assertEqual(bis.read_bit(), END_OF_STREAM)


if __name__ == '__main__':
    unittest.main()

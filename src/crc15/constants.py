"""Algorithm constants."""

CRC15_INIT = 0x7FFF
CRC15_POLY = 0x4599
CRC15_TOP_BIT = 0x8000  # tested after each shift
REGISTER_MASK = 0xFFFF  # 16-bit working register
BYTE_SHIFT = 7  # aligns each input byte's MSB with bit 14
CRC15_WIDTH = 15
REGISTER_WIDTH = 16
CRC15_CHECK = 0xAEDB  # crc15(b"123456789")
CRC15_DEMO_INPUT = bytes([0x41, 0x41, 0x41, 0x41])  # {'A','A','A','A'}

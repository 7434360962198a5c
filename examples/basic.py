"""Basic example walking through the CRC-15 API."""

from crc15 import (
    crc15,
    crc15_update,
    crc15_bytes,
    Crc15,
    CRC15_PARAMETERS,
)


def hex_dump(data: bytes, label: str = "") -> None:
    if label:
        print(f"\n  {label}")
    for i in range(0, len(data), 16):
        hex_values = " ".join(f"{b:02x}" for b in data[i : i + 16])
        print(f"  {i:04x}: {hex_values}")


def main() -> None:
    print("=" * 60)
    print("  CRC-15 Example")
    print(f"  {CRC15_PARAMETERS.describe()}")
    print("=" * 60)

    payload = b"AAAA"
    hex_dump(payload, "Payload bytes:")
    print(f"  crc15: 0x{crc15(payload):04X}")
    print(f"  as bytes: {crc15_bytes(payload).hex()}")

    print("\nSub-range of a larger buffer:")
    buffer = b"prefix_123456789_suffix"
    print(f"  crc15(buffer, 7, 16): 0x{crc15(buffer, 7, 16):04X}")

    print("\nIncremental, carrying the register forward:")
    crc = crc15(b"AA")
    print(f"  after 'AA': 0x{crc:04X}")
    crc = crc15_update(crc, b"AA")
    print(f"  after 'AAAA': 0x{crc:04X}")

    print("\nHasher interface:")
    h = Crc15()
    for chunk in (b"1234", b"5", b"6789"):
        h.update(chunk)
        print(f"  + {chunk!r:10} -> {h.hexdigest()}")
    print(f"  check value verified: {CRC15_PARAMETERS.verify_check()}")

    print("\nSingle-bit corruption is detected:")
    corrupted = bytearray(payload)
    corrupted[2] ^= 0x01
    print(f"  original 0x{crc15(payload):04X}, corrupted 0x{crc15(corrupted):04X}")


if __name__ == "__main__":
    main()

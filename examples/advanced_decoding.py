"""
Demo script for GS1 Scanner

Decodes a handful of barcodes, shows each field or the error that
stopped decoding, and combines several decodes with `sequence`.
"""

from gs1_scanner import GS1Scanner, sequence


def format_field(field):
    """Format a single field for display."""
    return f"({field.code}){field.value}"


def print_decode_result(scanner, title, barcode):
    """Print decode result with detailed information."""
    print("\n" + "=" * 80)
    print(f"  {title}")
    print("=" * 80)
    print(f"\nInput:    {barcode}")

    result = scanner.decode(barcode)

    if result.is_failure:
        error = result.unwrap_error()
        print(f"Error:    [{error.code.value}] {error.message}")
        return

    decoded = result.unwrap()
    print(f"Decoded:  {' '.join(format_field(f) for f in decoded)}")
    print("\nFields:")
    for field in decoded:
        print(f"  AI({field.code:4s}) {field.ai.title:20s} {field.value}")
        if field.decimal_value is not None:
            print(f"       decimal value: {field.decimal_value}")


def main():
    scanner = GS1Scanner.default().unwrap()

    cases = [
        ("GTIN + expiry + batch", "]C10106285096000842172901311012345"),
        ("Batch terminated by GS", "]C110ABC123<GS>0112345678901234"),
        ("Net weight, 3 decimals", "]C13103001125<GS>0106285096000842"),
        ("Unknown AI", "]C1XX1234"),
        ("Missing separator", "]C110LOT420112345678901234"),
        ("Missing FNC1", "0106285096000842"),
    ]

    for title, barcode in cases:
        print_decode_result(scanner, title, barcode)

    # Decode a batch and keep either every result or every error
    batch = sequence(scanner.decode(barcode) for _, barcode in cases[:3])
    gtins = batch.map(lambda results: [r.find_first_by_code("01").value for r in results])
    print("\n" + "=" * 80)
    print(f"  GTINs in batch: {gtins.get_or_else([])}")


if __name__ == "__main__":
    main()

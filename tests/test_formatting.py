import unittest

from fx_cur.utils.formatting import format_amount, format_conversion


class FormatAmountTests(unittest.TestCase):
    def test_small_values_keep_two_decimals(self) -> None:
        self.assertEqual(format_amount(11), "11.00")
        self.assertEqual(format_amount(10 / 1.1), "9.09")
        self.assertEqual(format_amount(0.5), "0.50")

    def test_values_below_threshold_are_not_grouped(self) -> None:
        self.assertEqual(format_amount(9999.99), "9999.99")
        self.assertEqual(format_amount(1234.5), "1234.50")

    def test_large_values_are_grouped_without_decimals(self) -> None:
        self.assertEqual(format_amount(12345.6), "12,346")
        self.assertEqual(format_amount(10_000), "10,000")
        self.assertEqual(format_amount(1_234_567.4), "1,234,567")

    def test_negative_values(self) -> None:
        self.assertEqual(format_amount(-12345.6), "-12,346")
        self.assertEqual(format_amount(-2.5), "-2.50")


class FormatConversionTests(unittest.TestCase):
    def test_compact_output_is_bare_number(self) -> None:
        self.assertEqual(format_conversion(10, "EUR", 11, "USD"), "11.00")

    def test_long_output(self) -> None:
        self.assertEqual(
            format_conversion(10, "EUR", 11, "USD", long_output=True),
            "10.00 EUR is 11.00 USD",
        )
        self.assertEqual(
            format_conversion(20_000, "EUR", 3_104_400, "JPY", long_output=True),
            "20,000 EUR is 3,104,400 JPY",
        )


if __name__ == "__main__":  # pragma: no cover - manual debugging helper
    unittest.main()

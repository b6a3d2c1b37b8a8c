"""
Unit tests for reverse_power, the console driver.
"""


import io
import unittest

from bigint import reverse_power
from bigint.reverse_power import reverse_digits


class ReverseDigitsTests(unittest.TestCase):

    def test_reverse_digits(self):
        self.assertEqual(0, reverse_digits(0))
        self.assertEqual(7, reverse_digits(7))
        self.assertEqual(21, reverse_digits(12))
        self.assertEqual(321, reverse_digits(123))
        self.assertEqual(21, reverse_digits(120))
        self.assertEqual(1, reverse_digits(100))
        self.assertEqual(99999, reverse_digits(99999))
        self.assertEqual(54321, reverse_digits(12345))

    def test_negative_not_reversed(self):
        with self.assertLogs('bigint.reverse_power', level='ERROR') as logs:
            self.assertEqual(-12, reverse_digits(-12))
        self.assertIn("negative", logs.output[0])


class ReversePowerMainTests(unittest.TestCase):

    def run_main(self, typed):
        stdin = io.StringIO(typed)
        stdout = io.StringIO()
        stderr = io.StringIO()
        status = reverse_power.main(stdin=stdin, stdout=stdout, stderr=stderr)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_twelve(self):
        status, out, err = self.run_main("12\n")
        self.assertEqual(0, status)
        self.assertEqual(reverse_power.PROMPT + "Result: 12^21 is 46005119909369701466112\n", out)
        self.assertEqual('', err)

    def test_zero(self):
        status, out, err = self.run_main("0\n")
        self.assertEqual(0, status)
        self.assertTrue(out.endswith("Result: 0^0 is 1\n"))

    def test_trailing_zero(self):
        status, out, err = self.run_main("10\n")
        self.assertTrue(out.endswith("Result: 10^1 is 10\n"))

    def test_prompt(self):
        self.assertEqual(
            "Please input an positive integer to get power result (0 - 99999): ",
            reverse_power.PROMPT,
        )

    def test_out_of_range_prompts_again(self):
        with self.assertLogs('bigint.reverse_power', level='WARNING') as logs:
            status, out, err = self.run_main("-5\n100000\n3\n")
        self.assertEqual(0, status)
        self.assertEqual(2, out.count("Only positive integers are accepted!\n"))
        self.assertEqual(3, out.count(reverse_power.PROMPT))
        self.assertTrue(out.endswith("Result: 3^3 is 27\n"))
        self.assertEqual(2, len(logs.output))

    def test_not_an_integer(self):
        with self.assertLogs('bigint.reverse_power', level='ERROR'):
            status, out, err = self.run_main("abc\n")
        self.assertEqual(1, status)
        self.assertEqual("There is something wrong when getting your input!\n", err)
        self.assertNotIn("Result", out)

    def test_no_input(self):
        with self.assertLogs('bigint.reverse_power', level='ERROR'):
            status, out, err = self.run_main("")
        self.assertEqual(1, status)
        self.assertEqual("There is something wrong when getting your input!\n", err)


if __name__ == '__main__':
    unittest.main()

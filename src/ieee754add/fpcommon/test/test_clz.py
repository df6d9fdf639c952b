from ieee754add.fpcommon.clz import CLZ, clz

import unittest
import random


class CLZTestCase(unittest.TestCase):
    def run_test(self, inputs, width=8):
        dut = CLZ(width)
        for i in inputs:
            expected = width - i.bit_length()
            self.assertEqual(dut.count(i), expected,
                             "clz(0x%x) width %d" % (i, width))

    def test_selected(self):
        inputs = [0, 15, 10, 127, 128, 255, 1]
        self.run_test(iter(inputs), width=8)

    def test_non_power_2(self):
        inputs = [0, 1, 128, 512, 1023]
        self.run_test(iter(inputs), width=10)

    def test_all_widths(self):
        for width in range(1, 34):
            inputs = [1 << i for i in range(width)] + [(1 << width) - 1]
            self.run_test(inputs, width=width)

    def test_random_27(self):
        random.seed(27)
        inputs = [random.randint(1, (1 << 27) - 1) >> random.randint(0, 26)
                  for i in range(1000)]
        self.run_test([i for i in inputs if i], width=27)

    def test_fn(self):
        self.assertEqual(clz(0b1000, 27), 23)
        self.assertEqual(clz(1 << 26, 27), 0)


if __name__ == "__main__":
    unittest.main()

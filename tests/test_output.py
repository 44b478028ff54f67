"""
Unit tests for serializing results to the GenerationOutput document.
"""

import math
import sys
import unittest
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from genreport.analysis import ActualHeatRate, GenerationOutput, GeneratorTotal, MaxEmissionDay
from genreport.output import format_number, to_element


class TestFormatNumber(unittest.TestCase):

    def test_finite(self):
        self.assertEqual(format_number(2.0), "2.0")
        self.assertEqual(format_number(0.25), "0.25")

    def test_non_finite(self):
        self.assertEqual(format_number(math.inf), "INF")
        self.assertEqual(format_number(-math.inf), "-INF")
        self.assertEqual(format_number(math.nan), "NaN")


class TestToElement(unittest.TestCase):
    """Test cases for the output tree shape."""

    def test_sections_in_fixed_order(self):
        root = to_element(GenerationOutput())
        self.assertEqual(root.tag, "GenerationOutput")
        self.assertEqual([child.tag for child in root], ["Totals", "MaxEmissionGenerators", "ActualHeatRates"])
        self.assertTrue(all(len(child) == 0 for child in root))

    def test_entries(self):
        output = GenerationOutput(
            totals=[GeneratorTotal("Coal[1]", 180.0)],
            max_emission_generators=[MaxEmissionDay("Coal[1]", "D2", 36.0), MaxEmissionDay("Wind", None, 0.0)],
            actual_heat_rates=[ActualHeatRate("Coal[1]", math.inf)],
        )
        root = to_element(output)

        generator = root.find("Totals/Generator")
        self.assertEqual(generator.findtext("Name"), "Coal[1]")
        self.assertEqual(generator.findtext("Total"), "180.0")

        days = root.findall("MaxEmissionGenerators/Day")
        self.assertEqual([child.tag for child in days[0]], ["Name", "Date", "Emission"])
        self.assertEqual(days[0].findtext("Date"), "D2")
        self.assertEqual(days[0].findtext("Emission"), "36.0")
        # Absent date is written as an empty element
        self.assertIsNotNone(days[1].find("Date"))
        self.assertIsNone(days[1].find("Date").text)

        heat_rate = root.find("ActualHeatRates/ActualHeatRate")
        self.assertEqual(heat_rate.findtext("Name"), "Coal[1]")
        self.assertEqual(heat_rate.findtext("HeatRate"), "INF")


if __name__ == "__main__":
    unittest.main()

import unittest

from daylayout.timeline import TimeMark, hour_boxes, show_two_digits, time_marks, twelve_hour_time


class TestTimeLabels(unittest.TestCase):
    def test_show_two_digits(self) -> None:
        self.assertEqual(show_two_digits(5), "05")
        self.assertEqual(show_two_digits(30), "30")
        self.assertEqual(show_two_digits("0"), "00")

    def test_twelve_hour_time(self) -> None:
        self.assertEqual(twelve_hour_time(9, 0), "9:00")
        self.assertEqual(twelve_hour_time(12, 30), "12:30")
        self.assertEqual(twelve_hour_time(13, 30), "1:30")
        self.assertEqual(twelve_hour_time(21, 0), "9:00")


class TestTimeMarks(unittest.TestCase):
    def test_default_day(self) -> None:
        marks = time_marks(9, 21)
        self.assertEqual(len(marks), 25)
        self.assertEqual(marks[0], TimeMark(9, 0))
        self.assertEqual(marks[1], TimeMark(9, 30))
        self.assertEqual(marks[-1], TimeMark(21, 0))

    def test_mark_properties(self) -> None:
        self.assertTrue(TimeMark(9, 0).is_major)
        self.assertFalse(TimeMark(9, 30).is_major)
        self.assertEqual(TimeMark(9, 0).am_pm, "AM")
        self.assertEqual(TimeMark(12, 0).am_pm, "PM")
        self.assertEqual(TimeMark(21, 0).label, "9:00")
        self.assertEqual(TimeMark(21, 0).am_pm, "PM")

    def test_hour_boxes(self) -> None:
        self.assertEqual(hour_boxes(9, 12), [9, 10, 11])
        self.assertEqual(len(hour_boxes(9, 21)), 12)


if __name__ == "__main__":
    unittest.main()

"""
Tests for the List-Response Parser.

These tests verify:
- Field extraction from well-formed lines (trimming, numeric parsing)
- Shortest-match behaviour for names/descriptions/addresses
- Dropping of malformed lines without raising
- Order preservation and duplicate handling
- Derived links on Attraction
"""

import pytest

from attraction_finder.agents.attractions.prompts import LINE_FORMAT_EXAMPLE
from attraction_finder.schemas.attractions import Attraction
from attraction_finder.services.attraction_parser import (
    parse_attraction_line,
    parse_attraction_lines,
    parse_attractions,
)

TAIPEI_101 = "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)"


# =============================================================================
# UNIT TESTS: Single line
# =============================================================================

class TestParseLine:
    """Tests for parse_attraction_line."""

    def test_reference_line(self):
        """The documented example line yields the exact record."""
        attraction = parse_attraction_line(TAIPEI_101)

        assert attraction is not None
        assert attraction.name == "台北101"
        assert attraction.description == "知名摩天大樓"
        assert attraction.address == "台北市信義區"
        assert attraction.coordinates.latitude == 25.0330
        assert attraction.coordinates.longitude == 121.5654

    def test_prompt_example_is_parseable(self):
        """The worked example in the prompt must satisfy the grammar."""
        attraction = parse_attraction_line(LINE_FORMAT_EXAMPLE)

        assert attraction is not None
        assert attraction.name == "景點名稱"
        assert attraction.address == "景點詳細地址"

    def test_index_value_is_ignored(self):
        attraction = parse_attraction_line(TAIPEI_101.replace("1.", "42.", 1))
        assert attraction is not None
        assert attraction.name == "台北101"

    def test_extra_whitespace_is_trimmed(self):
        line = "3.   象山步道   -   俯瞰台北的步道   (地址:   台北市信義區信義路五段  ,  緯度:  25.0274,  經度:  121.5762)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.name == "象山步道"
        assert attraction.description == "俯瞰台北的步道"
        assert attraction.address == "台北市信義區信義路五段"

    def test_no_whitespace_around_delimiters(self):
        line = "2.象山-步道(地址:台北市,緯度:25.0274,經度:121.5762)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.name == "象山"
        assert attraction.description == "步道"
        assert attraction.address == "台北市"

    def test_negative_coordinates(self):
        line = "1. Ushuaia Port - End of the world (地址: Ushuaia, 緯度: -54.8019, 經度: -68.3030)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.coordinates.latitude == -54.8019
        assert attraction.coordinates.longitude == -68.3030

    def test_integer_and_trailing_dot_coordinates(self):
        line = "1. Null Island - Origin (地址: Atlantic, 緯度: 0, 經度: 10.)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.coordinates.latitude == 0.0
        assert attraction.coordinates.longitude == 10.0

    def test_hyphen_inside_description(self):
        """Name ends at the first hyphen; later hyphens belong to the description."""
        line = "1. 淡水老街 - 老街 - 夕陽美景 (地址: 新北市淡水區, 緯度: 25.1690, 經度: 121.4399)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.name == "淡水老街"
        assert attraction.description == "老街 - 夕陽美景"

    def test_comma_inside_address(self):
        """Address ends at the comma followed by the latitude label."""
        line = "1. 故宮 - 博物院 (地址: 台北市士林區, 至善路二段221號, 緯度: 25.1024, 經度: 121.5485)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.address == "台北市士林區, 至善路二段221號"
        assert attraction.coordinates.latitude == 25.1024

    def test_parentheses_inside_description(self):
        line = "1. 北投溫泉 - 溫泉區 (含公園) (地址: 台北市北投區, 緯度: 25.1367, 經度: 121.5070)"
        attraction = parse_attraction_line(line)

        assert attraction is not None
        assert attraction.description == "溫泉區 (含公園)"

    def test_trailing_text_is_ignored(self):
        attraction = parse_attraction_line(TAIPEI_101 + " ⭐ 推薦")
        assert attraction is not None
        assert attraction.coordinates.longitude == 121.5654

    def test_carriage_return_is_stripped(self):
        assert parse_attraction_line(TAIPEI_101 + "\r") is not None

    @pytest.mark.parametrize("line", [
        "",
        "以下是推薦的景點：",
        "台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)",
        "1 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)",
        "1. 台北101 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)",
        "1. 台北101 - 知名摩天大樓 (Address: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)",
        "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 北緯25, 經度: 121.5654)",
        "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 經度: 121.5654, 緯度: 25.0330)",
        "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654",
        "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: +25.0330, 經度: 121.5654)",
        "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330 , 經度: 121.5654)",
        "**1. 台北101** - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)",
    ])
    def test_malformed_lines_return_none(self, line):
        assert parse_attraction_line(line) is None

    @pytest.mark.parametrize("latitude,longitude", [
        ("1" + "0" * 400, "2.0"),
        ("1.0", "-" + "9" * 400),
    ])
    def test_overflowing_coordinates_are_dropped(self, latitude, longitude):
        line = f"1. A - desc (地址: addr, 緯度: {latitude}, 經度: {longitude})"

        assert parse_attraction_line(line) is None

        parsed = parse_attraction_lines(line)
        assert parsed.attractions == []
        assert parsed.dropped_lines == [line]


# =============================================================================
# UNIT TESTS: Whole reply
# =============================================================================

class TestParseReply:
    """Tests for parse_attractions / parse_attraction_lines."""

    def test_five_line_reply(self):
        reply = "\n".join([
            "1. 台北101 - 知名摩天大樓 (地址: 台北市信義區, 緯度: 25.0330, 經度: 121.5654)",
            "2. 國父紀念館 - 紀念孫中山先生 (地址: 台北市信義區仁愛路四段505號, 緯度: 25.0400, 經度: 121.5600)",
            "3. 象山步道 - 熱門登山步道 (地址: 台北市信義區, 緯度: 25.0274, 經度: 121.5762)",
            "4. 松山文創園區 - 文創展覽空間 (地址: 台北市信義區光復南路133號, 緯度: 25.0438, 經度: 121.5606)",
            "5. 四四南村 - 眷村文化 (地址: 台北市信義區松勤街50號, 緯度: 25.0312, 經度: 121.5615)",
        ])

        attractions = parse_attractions(reply)

        assert [a.name for a in attractions] == [
            "台北101", "國父紀念館", "象山步道", "松山文創園區", "四四南村"
        ]

    def test_no_matching_lines_returns_empty(self):
        reply = "抱歉，我無法提供景點資訊。\n請稍後再試。"
        assert parse_attractions(reply) == []

    @pytest.mark.parametrize("reply", ["", "\n\n   \n", None])
    def test_empty_reply_returns_empty(self, reply):
        assert parse_attractions(reply) == []

    def test_malformed_lines_interleaved(self):
        """N well-formed + M malformed -> exactly N records in source order."""
        reply = "\n".join([
            "這是您附近的景點：",
            "1. A - first (地址: addr A, 緯度: 1.0, 經度: 2.0)",
            "not a line",
            "2. B - second (地址: addr B, 緯度: 3.0, 經度: 4.0)",
            "",
            "2.5 broken - (地址: x)",
            "3. C - third (地址: addr C, 緯度: 5.0, 經度: 6.0)",
            "祝您旅途愉快！",
        ])

        parsed = parse_attraction_lines(reply)

        assert [a.name for a in parsed.attractions] == ["A", "B", "C"]
        assert parsed.dropped_lines == [
            "這是您附近的景點：",
            "not a line",
            "2.5 broken - (地址: x)",
            "祝您旅途愉快！",
        ]

    def test_blank_lines_are_not_counted_as_dropped(self):
        parsed = parse_attraction_lines(f"\n\n{TAIPEI_101}\n\n")

        assert len(parsed.attractions) == 1
        assert parsed.dropped_lines == []

    def test_duplicates_are_kept(self):
        attractions = parse_attractions(f"{TAIPEI_101}\n{TAIPEI_101}")

        assert len(attractions) == 2
        assert attractions[0] == attractions[1]

    def test_windows_line_endings(self):
        reply = f"{TAIPEI_101}\r\n2. B - second (地址: addr B, 緯度: 3.0, 經度: 4.0)\r\n"
        assert len(parse_attractions(reply)) == 2


# =============================================================================
# UNIT TESTS: Attraction model
# =============================================================================

class TestAttractionModel:
    """Derived links and immutability."""

    def test_navigation_url(self):
        attraction = parse_attraction_line(TAIPEI_101)
        assert attraction.navigation_url == (
            "https://www.google.com/maps/dir/?api=1&destination=25.033,121.5654"
        )

    def test_image_url_encodes_name(self):
        attraction = parse_attraction_line(TAIPEI_101)
        assert attraction.image_url == "https://picsum.photos/seed/%E5%8F%B0%E5%8C%97101/600/400"

    def test_attraction_is_immutable(self):
        attraction = parse_attraction_line(TAIPEI_101)
        with pytest.raises(Exception):
            attraction.name = "changed"

    def test_links_are_serialized(self):
        dumped = parse_attraction_line(TAIPEI_101).model_dump()

        assert dumped["navigation_url"].startswith("https://www.google.com/maps/dir/")
        assert "picsum.photos" in dumped["image_url"]
        assert isinstance(Attraction.model_validate(dumped), Attraction)

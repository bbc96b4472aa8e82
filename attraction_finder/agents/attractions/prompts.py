"""
Attraction Prompt Templates

Contains the label tables and prompt builders for the two Gemini calls
made by the Recommendation Service.

Architecture:
- List prompt: Google Maps grounded call, free-text reply in a fixed
  numbered-line grammar (the Maps tool doesn't support response_schema,
  so the grammar is described in the prompt and parsed from text)
- Detail prompt: plain call with response_mime_type='application/json'
  and the AttractionDetail response_schema

All replies are requested in Traditional Chinese; the line grammar
uses Chinese field labels (地址 / 緯度 / 經度) that the parser depends on.
"""

from attraction_finder.schemas.attractions import (
    CategoryOption,
    Coordinates,
    DistanceOption,
)

# Number of attractions requested per list query (no pagination)
RESULT_COUNT = 5

RESPONSE_LANGUAGE = "繁體中文"

# Worked example embedded in the list prompt. Must stay parseable by
# attraction_finder.services.attraction_parser.
LINE_FORMAT_EXAMPLE = "1. 景點名稱 - 簡短描述 (地址: 景點詳細地址, 緯度: 25.0330, 經度: 121.5654)"


CATEGORY_LABELS = {
    CategoryOption.ALL: "各種",
    CategoryOption.NATURE: "自然生態與戶外",
    CategoryOption.CULTURE: "歷史文化與古蹟",
    CategoryOption.FOOD: "必吃美食與餐廳",
    CategoryOption.SHOPPING: "購物商圈",
    CategoryOption.ENTERTAINMENT: "休閒娛樂與活動",
}

DISTANCE_LABELS = {
    DistanceOption.KM_1: "1公里內 (步行可達)",
    DistanceOption.KM_5: "5公里內 (短途)",
    DistanceOption.KM_10: "10公里內 (車程範圍)",
}


def get_category_label(category: CategoryOption) -> str:
    """Prompt qualifier for a category. KeyError means the table is out of date."""
    return CATEGORY_LABELS[category]


def get_distance_label(distance: DistanceOption) -> str:
    """Prompt qualifier for a distance. KeyError means the table is out of date."""
    return DISTANCE_LABELS[distance]


def build_attractions_prompt(
    coordinates: Coordinates,
    category: CategoryOption,
    distance: DistanceOption,
) -> str:
    """
    Build the list-flow prompt.

    The prompt states the user's coordinates, the distance and category
    qualifiers, asks for exactly RESULT_COUNT attractions in Traditional
    Chinese, and spells out the numbered-line format with one example.

    Args:
        coordinates: User's current position
        category: Selected category
        distance: Selected search radius

    Returns:
        str: Prompt text ready to be sent to Gemini
    """
    category_text = get_category_label(category)
    distance_text = get_distance_label(distance)

    return (
        f"請根據我目前的位置 (緯度:{coordinates.latitude}, 經度:{coordinates.longitude})，"
        f"推薦{RESULT_COUNT}個「{distance_text}」且屬於「{category_text}」類型的熱門旅遊景點。"
        f"請用{RESPONSE_LANGUAGE}回答。"
        "每個景點需包含：景點名稱、簡短描述、詳細地址以及經緯度。"
        "請嚴格遵守以下數字列表格式，每個景點一行，不要添加任何額外文字或說明："
        f"'{LINE_FORMAT_EXAMPLE}'。"
    )


def build_attraction_detail_prompt(attraction_name: str) -> str:
    """Build the detail-flow prompt for one attraction."""
    return (
        f"請為我詳細介紹一下「{attraction_name}」這個景點。請提供："
        "1. 一段詳細的描述 (description)，包含歷史、特色、推薦的參觀重點。"
        "2. 該景點的交通方式 (traffic)。"
        "3. 幾條相關的評論 (reviews)。"
        f"請用{RESPONSE_LANGUAGE}回答，並以 JSON 格式輸出，"
        "嚴格遵循提供的 schema，不要包含任何額外的文字或說明。"
    )

from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Catalog base quantities are written for this many people
REFERENCE_HOUSEHOLD_SIZE: Final[int] = 4

# Sunday-first, matches the labels stored on every scheduled recipe
WEEKDAY_LABELS: Final[tuple[str, ...]] = (
    "日曜日", "月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日",
)

# Name fragments that mark a fried / battered dish (diet mode denylist)
FRIED_DISH_MARKERS: Final[tuple[str, ...]] = ("揚げ", "フライ", "天ぷら", "カツ", "から揚げ")

# Genre label heuristic: first list with a matching fragment wins
GENRE_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "japanese": ("照り焼き", "塩焼き", "生姜焼き", "親子丼", "味噌煮", "から揚げ",
                 "お浸し", "胡麻和え", "きんぴら", "味噌汁", "すまし汁"),
    "western": ("ハンバーグ", "ステーキ", "シチュー", "グリル", "ソテー", "フライ",
                "サラダ", "コールスロー", "ガーリック", "コーンスープ", "オニオンスープ"),
    "chinese": ("麻婆", "青椒", "エビチリ", "回鍋肉", "酢豚", "ナムル", "中華風", "春雨",
                "わかめスープ", "卵スープ", "酸辣湯"),
}

# Default day split when the caller gives no explicit distribution
DEFAULT_CUISINE_SHARES: Final[dict[str, float]] = {"japanese": 0.4, "western": 0.3, "chinese": 0.3}

# Staples the household is assumed to always have (sent to the remote generator)
PANTRY_STAPLES: Final[tuple[dict[str, str], ...]] = (
    {"name": "醤油", "unit": "ml"},
    {"name": "塩", "unit": "g"},
    {"name": "味噌", "unit": "g"},
    {"name": "みりん", "unit": "ml"},
    {"name": "砂糖", "unit": "g"},
    {"name": "ごま油", "unit": "ml"},
    {"name": "オリーブオイル", "unit": "ml"},
    {"name": "バター", "unit": "g"},
    {"name": "コンソメ", "unit": "g"},
    {"name": "だし汁", "unit": "ml"},
)

# Inventory priority hints
NEAR_EXPIRY_DAYS: Final[int] = 3
OVERSTOCK_AMOUNT: Final[int] = 500

# Free-text preference keywords -> normalized allergy / dislike labels
ALLERGY_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "卵": ("卵アレルギー", "卵ng"),
    "乳製品": ("乳製品アレルギー", "乳製品ng"),
    "小麦": ("小麦アレルギー", "小麦ng"),
    "そば": ("そばアレルギー", "そばng"),
    "えび": ("えびアレルギー", "えびng"),
}
DISLIKE_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "魚": ("魚嫌い", "魚ng"),
    "野菜": ("野菜嫌い", "野菜ng"),
    "辛い料理": ("辛いもの嫌い", "辛いものng"),
}

INVENTORY_NOTE_PREFIX: Final[str] = "在庫を活用: "

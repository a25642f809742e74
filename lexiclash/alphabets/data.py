"""Letter inventories for the supported board languages."""

from typing import Dict, List


ENGLISH_LETTERS: List[str] = list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

SWEDISH_LETTERS: List[str] = list("ABCDEFGHIJKLMNOPQRSTUVWXYZÅÄÖ")

# Base forms only; final forms never appear on a board
HEBREW_LETTERS: List[str] = [
    "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט", "י",
    "כ", "ל", "מ", "נ", "ס", "ע", "פ", "צ", "ק", "ר", "ש", "ת",
]

HEBREW_FINAL_TO_REGULAR: Dict[str, str] = {
    "ץ": "צ",
    "ך": "כ",
    "ם": "מ",
    "ן": "נ",
    "ף": "פ",
}

HEBREW_REGULAR_TO_FINAL: Dict[str, str] = {
    regular: final for final, regular in HEBREW_FINAL_TO_REGULAR.items()
}

# Common kanji for word games
JAPANESE_LETTERS: List[str] = [
    "日", "本", "人", "年", "月", "火", "水", "木", "金", "土",
    "一", "二", "三", "四", "五", "六", "七", "八", "九", "十",
    "大", "小", "中", "上", "下", "左", "右", "前", "後", "内",
    "外", "多", "少", "高", "低", "長", "短", "新", "古", "明",
    "暗", "強", "弱", "重", "軽", "早", "遅", "近", "遠", "広",
    "狭", "深", "浅", "太", "細", "厚", "薄", "硬", "柔", "良",
    "悪", "美", "醜", "正", "誤", "真", "偽", "善", "安", "危",
    "生", "死", "男", "女", "父", "母", "子", "兄", "弟", "姉",
    "妹", "友", "敵", "王", "国", "天", "地", "山", "川", "海",
    "空", "雲", "雨", "雪", "風", "花", "草", "石", "音", "色",
    "光", "力", "心", "手", "足", "目", "耳", "口", "頭", "体",
]

# Compounds may use kanji outside JAPANESE_LETTERS; those only reach the
# board through embedding
KANJI_COMPOUNDS: List[str] = [
    "日本", "本人", "本日", "日中", "人口", "人生", "人物",
    "年月", "年金", "月日", "月光", "火山", "火力", "水中",
    "水道", "木目", "金色", "土地", "一人", "一本", "一日",
    "大人", "大国", "大小", "大学", "小人", "中国", "中心",
    "上下", "上手", "下手", "左右", "前後", "内外", "高山",
    "長男", "新人", "古本", "明日", "強力", "生物", "男女",
    "父母", "兄弟", "友人", "王国", "天地", "山川", "海空",
    "一年生", "大人物", "中学生", "火山灰", "新年会",
]

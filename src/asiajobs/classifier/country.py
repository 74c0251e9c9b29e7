"""Country inference from free-text job fields.

Three ordered tables are consulted in turn:

1. COUNTRY_PATTERNS: country names, aliases and abbreviations.
2. CITY_HINTS: major cities and provinces.
3. DOMAIN_HINTS: host suffixes of the posting URL.

Text fields are joined in TEXT_FIELDS order and each table is tried against
the joined text; the first entry that matches wins. Table order is
significant: overlapping patterns (the Koreas, Macao/China, Georgia)
depend on it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from urllib.parse import urlsplit

TEXT_FIELDS = ("country", "location", "city", "school", "title", "description")
URL_FIELDS = ("original_url", "apply_url")


def _rule(pattern: str, label: str) -> tuple[re.Pattern, str]:
    return re.compile(pattern, re.IGNORECASE), label


def _hint(names: str, label: str) -> tuple[re.Pattern, str]:
    return re.compile(rf"\b(?:{names})\b", re.IGNORECASE), label


def _tld(suffix: str, label: str) -> tuple[re.Pattern, str]:
    return re.compile(rf"\.{suffix}$"), label


COUNTRY_PATTERNS: tuple[tuple[re.Pattern, str], ...] = (
    # Northeast Asia
    _rule(r"hong\s*kong", "Hong Kong SAR"),
    _rule(r"\bmaca[ou]\b", "Macao SAR"),
    _rule(r"\bchina\b|\bprc\b|\bmainland\b", "China"),
    _rule(r"taiwan", "Taiwan"),
    _rule(r"japan", "Japan"),
    _rule(
        r"south\s*korea"
        r"|(?<!people's )(?<!democratic )republic\s+of\s+korea"
        r"|(?<!north )(?<!north)(?<!republic of )\bkorea\b(?!.*north)",
        "South Korea",
    ),
    _rule(r"north\s*korea|\bdprk\b|democratic\s+people'?s\s+republic\s+of\s+korea", "North Korea"),
    _rule(r"mongolia", "Mongolia"),
    # Southeast Asia
    _rule(r"brunei", "Brunei"),
    _rule(r"cambodia|kampuchea", "Cambodia"),
    _rule(r"indonesia", "Indonesia"),
    _rule(r"\blaos\b|\blao\s?pdr\b", "Laos"),
    _rule(r"malaysia", "Malaysia"),
    _rule(r"myanmar|burma", "Myanmar"),
    _rule(r"philippines", "Philippines"),
    _rule(r"singapore", "Singapore"),
    _rule(r"thailand", "Thailand"),
    _rule(r"timor[-\s]?leste|east\s*timor", "Timor-Leste"),
    _rule(r"viet\s*nam", "Vietnam"),
    # South Asia
    _rule(r"\bindia\b", "India"),
    _rule(r"pakistan", "Pakistan"),
    _rule(r"bangladesh", "Bangladesh"),
    _rule(r"sri\s*-?\s*lanka", "Sri Lanka"),
    _rule(r"nepal", "Nepal"),
    _rule(r"bhutan", "Bhutan"),
    _rule(r"maldives", "Maldives"),
    _rule(r"afghanistan", "Afghanistan"),
    # Central Asia
    _rule(r"kazakhstan", "Kazakhstan"),
    _rule(r"uzbekistan", "Uzbekistan"),
    _rule(r"kyrgyzstan|kirghiz", "Kyrgyzstan"),
    _rule(r"tajikistan", "Tajikistan"),
    _rule(r"turkmenistan", "Turkmenistan"),
    # West Asia / Middle East
    _rule(r"\buae\b|united\s*arab\s*emirates", "United Arab Emirates"),
    _rule(r"\bksa\b|saudi\s*arabia", "Saudi Arabia"),
    _rule(r"qatar", "Qatar"),
    _rule(r"\boman\b", "Oman"),
    _rule(r"bahrain", "Bahrain"),
    _rule(r"kuwait", "Kuwait"),
    _rule(r"\bjordan\b", "Jordan"),
    _rule(r"lebanon", "Lebanon"),
    _rule(r"israel", "Israel"),
    _rule(r"palestin(?:e|ian)", "Palestine"),
    _rule(r"\biran\b", "Iran"),
    _rule(r"\biraq\b", "Iraq"),
    _rule(r"t[uü]rkiye|\bturkey\b", "Turkey"),
    _rule(r"syria", "Syria"),
    _rule(r"yemen", "Yemen"),
    # Not the US state or its institutions
    _rule(
        r"\bgeorgia\b(?!\s*(?:state\b|tech\b|\(\s*us|,?\s*(?:usa?|united\s+states)\b))",
        "Georgia",
    ),
    _rule(r"armenia", "Armenia"),
    _rule(r"azerbaijan", "Azerbaijan"),
)

CITY_HINTS: tuple[tuple[re.Pattern, str], ...] = (
    _hint(r"kowloon|new\s+territories|tsim\s+sha\s+tsui", "Hong Kong SAR"),
    _hint(r"taipa|cotai", "Macao SAR"),
    _hint(
        r"shanghai|beijing|shenzhen|guangzhou|hangzhou|suzhou|nanjing|chengdu|wuhan"
        r"|tianjin|xi'?an|qingdao|ningbo|chongqing|xiamen|dalian|guangdong|jiangsu"
        r"|zhejiang|sichuan|shandong|fujian|hubei|yunnan",
        "China",
    ),
    _hint(r"taipei|kaohsiung|taichung|hsinchu", "Taiwan"),
    _hint(r"tokyo|osaka|kyoto|yokohama|nagoya|fukuoka|sapporo|kobe|hokkaido|okinawa", "Japan"),
    _hint(r"seoul|busan|incheon|daegu|daejeon|gwangju|jeju|songdo", "South Korea"),
    _hint(r"pyongyang", "North Korea"),
    _hint(r"ulaanbaatar|ulan\s+bator", "Mongolia"),
    _hint(r"bandar\s+seri\s+begawan", "Brunei"),
    _hint(r"phnom\s+penh|siem\s+reap", "Cambodia"),
    _hint(r"jakarta|bali|surabaya|bandung", "Indonesia"),
    _hint(r"vientiane", "Laos"),
    _hint(r"kuala\s+lumpur|penang|johor|selangor|kota\s+kinabalu", "Malaysia"),
    _hint(r"yangon|mandalay", "Myanmar"),
    _hint(r"manila|cebu|makati|quezon\s+city", "Philippines"),
    _hint(r"bangkok|chiang\s+mai|phuket|pattaya", "Thailand"),
    _hint(r"dili", "Timor-Leste"),
    _hint(r"hanoi|ho\s+chi\s+minh|saigon|da\s+nang|hai\s+phong", "Vietnam"),
    _hint(
        r"mumbai|new\s+delhi|delhi|bangalore|bengaluru|chennai|hyderabad|kolkata|pune"
        r"|gurgaon|gurugram|noida",
        "India",
    ),
    _hint(r"karachi|lahore|islamabad", "Pakistan"),
    _hint(r"dhaka|chittagong", "Bangladesh"),
    _hint(r"colombo|kandy", "Sri Lanka"),
    _hint(r"kathmandu|pokhara", "Nepal"),
    _hint(r"thimphu", "Bhutan"),
    _hint(r"kabul", "Afghanistan"),
    _hint(r"almaty|astana|nur-sultan", "Kazakhstan"),
    _hint(r"tashkent|samarkand", "Uzbekistan"),
    _hint(r"bishkek", "Kyrgyzstan"),
    _hint(r"dushanbe", "Tajikistan"),
    _hint(r"ashgabat", "Turkmenistan"),
    _hint(r"dubai|abu\s+dhabi|sharjah|ajman|ras\s+al\s+khaimah", "United Arab Emirates"),
    _hint(r"riyadh|jeddah|dammam|khobar|makkah|mecca|medina", "Saudi Arabia"),
    _hint(r"doha", "Qatar"),
    _hint(r"muscat", "Oman"),
    _hint(r"manama", "Bahrain"),
    _hint(r"amman", "Jordan"),
    _hint(r"beirut", "Lebanon"),
    _hint(r"tel\s+aviv|haifa", "Israel"),
    _hint(r"ramallah|gaza", "Palestine"),
    _hint(r"tehran|isfahan", "Iran"),
    _hint(r"baghdad|erbil", "Iraq"),
    _hint(r"istanbul|ankara|izmir|antalya", "Turkey"),
    _hint(r"damascus|aleppo", "Syria"),
    _hint(r"sana'?a", "Yemen"),
    _hint(r"tbilisi|batumi", "Georgia"),
    _hint(r"yerevan", "Armenia"),
    _hint(r"baku", "Azerbaijan"),
)

DOMAIN_HINTS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"(?:^|\.)chinauniversityjobs\.com$"), "China"),
    _tld("hk", "Hong Kong SAR"),
    _tld("mo", "Macao SAR"),
    _tld("cn", "China"),
    _tld("tw", "Taiwan"),
    _tld("jp", "Japan"),
    _tld("kr", "South Korea"),
    _tld("kp", "North Korea"),
    _tld("mn", "Mongolia"),
    _tld("bn", "Brunei"),
    _tld("kh", "Cambodia"),
    _tld("id", "Indonesia"),
    _tld("la", "Laos"),
    _tld("my", "Malaysia"),
    _tld("mm", "Myanmar"),
    _tld("ph", "Philippines"),
    _tld("sg", "Singapore"),
    _tld("th", "Thailand"),
    _tld("tl", "Timor-Leste"),
    _tld("vn", "Vietnam"),
    _tld("in", "India"),
    _tld("pk", "Pakistan"),
    _tld("bd", "Bangladesh"),
    _tld("lk", "Sri Lanka"),
    _tld("np", "Nepal"),
    _tld("bt", "Bhutan"),
    _tld("mv", "Maldives"),
    _tld("af", "Afghanistan"),
    _tld("kz", "Kazakhstan"),
    _tld("uz", "Uzbekistan"),
    _tld("kg", "Kyrgyzstan"),
    _tld("tj", "Tajikistan"),
    _tld("tm", "Turkmenistan"),
    _tld("ae", "United Arab Emirates"),
    _tld("sa", "Saudi Arabia"),
    _tld("qa", "Qatar"),
    _tld("om", "Oman"),
    _tld("bh", "Bahrain"),
    _tld("kw", "Kuwait"),
    _tld("jo", "Jordan"),
    _tld("lb", "Lebanon"),
    _tld("il", "Israel"),
    _tld("ps", "Palestine"),
    _tld("ir", "Iran"),
    _tld("iq", "Iraq"),
    _tld("tr", "Turkey"),
    _tld("sy", "Syria"),
    _tld("ye", "Yemen"),
    _tld("ge", "Georgia"),
    _tld("am", "Armenia"),
    _tld("az", "Azerbaijan"),
)


def classify_country(record) -> str:
    """Best-effort country label for a job record (mapping or model).

    Falls back to the record's own country, then location, trimmed. Returns
    "" when nothing is known.
    """
    text = " ".join(t for t in (_field(record, name).strip() for name in TEXT_FIELDS) if t)

    for table in (COUNTRY_PATTERNS, CITY_HINTS):
        label = _first_match([text], table)
        if label:
            return label

    hosts = [_host(_field(record, name)) for name in URL_FIELDS]
    label = _first_match(hosts, DOMAIN_HINTS)
    if label:
        return label

    return _field(record, "country").strip() or _field(record, "location").strip()


def _first_match(texts: list[str], table: tuple[tuple[re.Pattern, str], ...]) -> str:
    for text in texts:
        if not text:
            continue
        for pattern, label in table:
            if pattern.search(text):
                return label
    return ""


def _field(record, name: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _host(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    if "://" not in url:
        url = "//" + url
    try:
        return (urlsplit(url).hostname or "").rstrip(".")
    except ValueError:
        return ""

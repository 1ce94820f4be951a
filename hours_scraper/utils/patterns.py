"""
Regular expression patterns and static lookup tables for hours extraction.
"""

import re

# ============================================================
# DAY TABLES
# ============================================================

DAY_NAMES = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')

# Abbreviation -> canonical day name
DAY_ABBREVIATIONS = {
    'monday': 'monday', 'mon': 'monday', 'mo': 'monday',
    'tuesday': 'tuesday', 'tue': 'tuesday', 'tu': 'tuesday',
    'wednesday': 'wednesday', 'wed': 'wednesday', 'we': 'wednesday',
    'thursday': 'thursday', 'thu': 'thursday', 'th': 'thursday',
    'friday': 'friday', 'fri': 'friday', 'fr': 'friday',
    'saturday': 'saturday', 'sat': 'saturday', 'sa': 'saturday',
    'sunday': 'sunday', 'sun': 'sunday', 'su': 'sunday',
}

# ============================================================
# TIME PATTERNS
# ============================================================

# Leading words that are not part of a clock time ("from 9 am")
TIME_PREFIX_PATTERN = re.compile(r'^(?:at|from|until|to|open|close)\s+', re.IGNORECASE)

# Trailing noise after a clock time ("9 p.m. daily", "5 pm, except holidays")
TIME_SUFFIX_PATTERN = re.compile(r'(?:\s*[,;].*|\s+(?:daily|and|or)\b.*)$', re.IGNORECASE)

# 12-hour clock with minutes (e.g., "9:30 a.m.", "5:00 PM")
TIME_12H_MINUTES = re.compile(r'(\d{1,2}):(\d{2})\s*([ap])\.?\s?m\b\.?', re.IGNORECASE)

# 12-hour clock without minutes (e.g., "9 am", "5 p.m.")
TIME_12H_HOUR_ONLY = re.compile(r'(\d{1,2})\s*([ap])\.?\s?m\b\.?', re.IGNORECASE)

# 24-hour clock, whole token (e.g., "17:00")
TIME_24H = re.compile(r'^(\d{1,2}):(\d{2})$')

# Leading label on a range ("Hours: 9-5", "Open 9 am - 5 pm")
RANGE_LABEL_PATTERN = re.compile(r'^(?:hours?|open|from)\s*:?\s*', re.IGNORECASE)

# Range separators, in priority order
RANGE_SEPARATORS = ('-', '–', '—', 'to', 'until', 'through')

# Loose time signal used when scanning page text (e.g., "9 a.m.")
TIME_SIGNAL_PATTERN = re.compile(r'\d{1,2}\s*(?:a\.?m\.?|p\.?m\.?|am|pm)', re.IGNORECASE)

# ============================================================
# SCHEDULE PATTERNS
# ============================================================

# "24 hours", "Open 24 hrs"
HOURS_24_PATTERN = re.compile(r'(?:open\s+)?24\s*(?:hours|hrs)', re.IGNORECASE)

HOURS_DAILY_PATTERN = re.compile(r'daily', re.IGNORECASE)

HOURS_CALL_PATTERN = re.compile(r'call\s+for\s+hours', re.IGNORECASE)

# Sentence-ish delimiters for splitting a block into lines; periods inside
# "a.m." / "p.m." do not split, but a word after a closing "p.m." starts a
# new line unless it continues the range
SCHEDULE_LINE_SPLIT = re.compile(
    r'(?<![\d\s][ap])(?<![ap]\.m)\.'
    r'|(?<=[ap]\.m\.)\s+(?=[a-z])(?!(?:to|until|till|through|thru)\b)'
    r'|[\n;]',
    re.IGNORECASE
)

# "Monday - Friday: 9am-5pm"
DAY_RANGE_LINE = re.compile(r'(\w+)\s*[–—\-]\s*(\w+)[:\s]+(.+)', re.IGNORECASE)

# "Monday, Wednesday and Friday: 9am-5pm" (days before the label colon)
DAY_LIST_LINE = re.compile(r'([A-Za-z\s,&–—\-]+?)\s*:\s*(.+)', re.IGNORECASE)

# "Sunday: Closed"
SINGLE_DAY_LINE = re.compile(r'(\w+)[:\s]+(.+)', re.IGNORECASE)

# Lines starting with a weekday name (not usable as a location name)
DAY_LEADING_PATTERN = re.compile(
    r'^(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)',
    re.IGNORECASE
)

# ============================================================
# CANDIDATE KEYWORDS
# ============================================================

HOURS_KEYWORDS = (
    'hours', 'open', 'closed', 'schedule', 'availability', 'visiting',
) + DAY_NAMES

HOURS_HEADING_KEYWORDS = ('hours', 'visiting')

# ============================================================
# ADDRESS PATTERNS
# ============================================================

STREET_SUFFIXES = (
    'Street', 'St', 'Avenue', 'Ave', 'Road', 'Rd', 'Boulevard', 'Blvd',
    'Drive', 'Dr', 'Lane', 'Ln', 'Court', 'Ct', 'Way', 'Circle', 'Cir',
    'Parkway', 'Pkwy', 'Highway', 'Hwy',
)


def build_address_pattern(suffixes=STREET_SUFFIXES) -> re.Pattern:
    """Street number, words, street type, then a state code and 5-digit ZIP."""
    return re.compile(
        r'(\d+\s+[A-Z][\w\s,]+(?:' + '|'.join(suffixes) + r')[\w\s,]*?[A-Z]{2}\s+\d{5})',
        re.IGNORECASE
    )


ADDRESS_PATTERN = build_address_pattern()

# ============================================================
# PHONE NUMBER PATTERNS
# ============================================================

PHONE_PATTERNS = (
    re.compile(r'(\d{3}[-.\s]?\d{3}[-.\s]?\d{4})'),
    re.compile(r'\((\d{3})\)\s*(\d{3})[-.\s]?(\d{4})'),
)

# ============================================================
# LOCATION PATTERNS
# ============================================================

FACILITY_CATEGORIES = (
    'Hospitals', 'Physician Practices', 'Labs & Imaging', 'Pharmacies',
    'Rehabilitation Centers', 'Same Day Care', 'Senior Living', 'Surgery',
    'Hospice & Palliative Care', 'Emergency Department', 'Urgent Care',
)


def build_category_pattern(categories=FACILITY_CATEGORIES) -> re.Pattern:
    return re.compile('(' + '|'.join(re.escape(c) for c in categories) + ')', re.IGNORECASE)


CATEGORY_PATTERN = build_category_pattern()

# Repeating "card" elements on listing pages
LOCATION_CARD_SELECTOR = 'article, [class*="location"], [class*="result"], [class*="card"]'

LOCATION_NAME_SELECTOR = 'h2, h3, h4, h5, strong, [class*="name"], [class*="title"]'

CANDIDATE_TEXT_SELECTOR = 'p, div, li, td, span'

HOURS_HEADING_SELECTOR = 'h2, h3, h4'

# ============================================================
# HELPER FUNCTIONS
# ============================================================


def clean_whitespace(text: str) -> str:
    """Clean and normalize whitespace in text."""
    if not text:
        return ""
    # Replace multiple spaces with single space
    text = re.sub(r'\s+', ' ', text)
    # Remove leading/trailing whitespace
    return text.strip()


def has_time_signal(text: str) -> bool:
    """True when text carries a clock time or a '24 hours' phrase."""
    return bool(TIME_SIGNAL_PATTERN.search(text) or HOURS_24_PATTERN.search(text))

"""TikTok URL shape check.

A candidate is accepted when it starts with a known TikTok host, or when any
of the path patterns appears anywhere in it. The path patterns overlap the host
pattern; together they are the same set the browser client accepts.
"""

import re

ROOT_PATTERN = re.compile(
    r'^https?://(www\.)?(tiktok\.com|vm\.tiktok\.com|m\.tiktok\.com|vt\.tiktok\.com)',
    re.ASCII,
)

# ``.*`` that stops at every line terminator, including \r and U+2028/U+2029
ANY_ON_LINE = r"[^\n\r\u2028\u2029]*"

PATH_PATTERNS = (
    re.compile(r'tiktok\.com/@[\w\.-]+/video/\d+', re.ASCII),  # user video
    re.compile(r'tiktok\.com/t/[\w\d]+', re.ASCII),  # share link
    re.compile(r'vm\.tiktok\.com/[\w\d]+', re.ASCII),
    re.compile(r'vt\.tiktok\.com/[\w\d]+', re.ASCII),
    re.compile(r'm\.tiktok\.com/v/\d+', re.ASCII),  # mobile
    re.compile(r'tiktok\.com/' + ANY_ON_LINE + r'/video/\d+', re.ASCII),  # embeds and anything else with /video/<id>
)


def is_valid_url(candidate: str) -> bool:
    if not candidate or not isinstance(candidate, str):
        return False
    if ROOT_PATTERN.match(candidate):
        return True
    return any(p.search(candidate) for p in PATH_PATTERNS)

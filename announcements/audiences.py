# NOTE:
# - Labels are matched case-sensitively; anything not listed here is treated
#   as a category name in its own right, so categories added in Megaphone
#   work without a code change.
# - Group labels expand in a fixed order (UGT, PGT, PGR, Staff).

AUDIENCES = {
    "UGT": ["UGT"],
    "PGT": ["PGT"],
    "PGR": ["PGR"],
    "Staff": ["Staff"],
    "Students_all": ["UGT", "PGT", "PGR"],
    "Students_taught": ["UGT", "PGT"],
    "All": ["UGT", "PGT", "PGR", "Staff"],
}


def known_audiences():
    """Canonical audience labels, in table order."""
    return list(AUDIENCES)


def resolve_audience(label):
    """Expand an audience label into the category names to query.

    'Students_all' gives ['UGT', 'PGT', 'PGR']; an unknown label comes back
    unchanged as a single-element list. Duplicates are dropped, order kept.
    """
    names = AUDIENCES.get(label, [label])
    return list(dict.fromkeys(names))

"""
ZIP prefix to state lookup.

Ranges are inclusive 3-digit ZIP prefixes. The first matching range wins,
so single-prefix exceptions are listed ahead of the broad ranges they
fall inside.
"""

import re
from typing import Optional, Tuple

ZIP_QUERY_PATTERN = re.compile(r'^[0-9]{3,5}$')

ZIP_PREFIX_RANGES: Tuple[Tuple[int, int, str], ...] = (
    # Exceptions inside another state's block
    (5, 5, 'NY'),
    (55, 55, 'MA'),
    (201, 201, 'VA'),
    (733, 733, 'TX'),
    (885, 885, 'TX'),

    (10, 27, 'MA'),
    (28, 29, 'RI'),
    (30, 38, 'NH'),
    (39, 49, 'ME'),
    (50, 59, 'VT'),
    (60, 69, 'CT'),
    (70, 89, 'NJ'),
    (100, 149, 'NY'),
    (150, 196, 'PA'),
    (197, 199, 'DE'),
    (200, 205, 'DC'),
    (206, 219, 'MD'),
    (220, 246, 'VA'),
    (247, 268, 'WV'),
    (270, 289, 'NC'),
    (290, 299, 'SC'),
    (300, 319, 'GA'),
    (320, 349, 'FL'),
    (350, 369, 'AL'),
    (370, 385, 'TN'),
    (386, 397, 'MS'),
    (398, 399, 'GA'),
    (400, 427, 'KY'),
    (430, 459, 'OH'),
    (460, 479, 'IN'),
    (480, 499, 'MI'),
    (500, 528, 'IA'),
    (530, 549, 'WI'),
    (550, 567, 'MN'),
    (570, 577, 'SD'),
    (580, 588, 'ND'),
    (590, 599, 'MT'),
    (600, 629, 'IL'),
    (630, 658, 'MO'),
    (660, 679, 'KS'),
    (680, 693, 'NE'),
    (700, 714, 'LA'),
    (716, 729, 'AR'),
    (730, 749, 'OK'),
    (750, 799, 'TX'),
    (800, 816, 'CO'),
    (820, 831, 'WY'),
    (832, 838, 'ID'),
    (840, 847, 'UT'),
    (850, 865, 'AZ'),
    (870, 884, 'NM'),
    (889, 898, 'NV'),
    (900, 961, 'CA'),
    (967, 968, 'HI'),
    (970, 979, 'OR'),
    (980, 994, 'WA'),
    (995, 999, 'AK'),
)


def is_zip_query(term: str) -> bool:
    return bool(ZIP_QUERY_PATTERN.match(term))


def state_for_zip(term: str) -> Optional[str]:
    """
    Resolve a 3-5 digit ZIP (or ZIP prefix) to a state code.

    Only the first three digits are used. Returns None when the term is not
    a ZIP query or the prefix is unassigned.
    """
    if not is_zip_query(term):
        return None

    prefix = int(term[:3])
    for low, high, state_code in ZIP_PREFIX_RANGES:
        if low <= prefix <= high:
            return state_code
    return None

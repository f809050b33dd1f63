"""Test fixtures for basketsplit tests.

Sample catalogues, baskets and the groups they are expected to split into.
"""

# Spec-sized example: two methods tie on the first round
TINY_CATALOGUE = {
    'A': ['courier', 'parcel'],
    'B': ['courier'],
    'C': ['parcel'],
}

# Grocery store catalogue with overlapping delivery methods
STORE_CATALOGUE = {
    'Carrots (1kg)': ['Express Collection'],
    'Cold Beer (330ml) Multipack 4 x': ['Express Collection'],
    'Steak (300g)': ['Express Collection', 'Courier'],
    'AA Battery (4 Pcs.)': ['Express Collection', 'Courier', 'Mailbox delivery'],
    'Espresso Machine': ['Courier', 'Parcel locker', 'Pick-up point'],
    'Garden Chair': ['Courier'],
    'Tea Bags (80 Pcs.)': ['Pick-up point', 'Parcel locker', 'Mailbox delivery'],
    'Cocoa Butter': ['Mailbox delivery', 'Next day shipping'],
    'Empty Promise': [],
}

# Express Collection and Courier both cover four products, Courier sorts first
BASKET_1 = [
    'Steak (300g)',
    'Carrots (1kg)',
    'Cold Beer (330ml) Multipack 4 x',
    'AA Battery (4 Pcs.)',
    'Espresso Machine',
    'Garden Chair',
]

BASKET_1_EXPECTED = {
    'Courier': [
        'Steak (300g)',
        'AA Battery (4 Pcs.)',
        'Espresso Machine',
        'Garden Chair',
    ],
    'Express Collection': ['Carrots (1kg)', 'Cold Beer (330ml) Multipack 4 x'],
}

# Duplicates, an unknown product and a product no method can carry
BASKET_2 = [
    'Tea Bags (80 Pcs.)',
    'Cocoa Butter',
    'Espresso Machine',
    'Unknown Widget',
    'Carrots (1kg)',
    'Empty Promise',
    'Tea Bags (80 Pcs.)',
]

BASKET_2_EXPECTED = {
    'Mailbox delivery': ['Tea Bags (80 Pcs.)', 'Cocoa Butter', 'Tea Bags (80 Pcs.)'],
    'Courier': ['Espresso Machine'],
    'Express Collection': ['Carrots (1kg)'],
}

STORE_CATALOGUE_YAML = """\
Carrots (1kg):
  - Express Collection
Steak (300g):
  - Express Collection
  - Courier
Garden Chair:
  - Courier
"""

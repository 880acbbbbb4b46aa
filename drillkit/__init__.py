"""Small classic programming drills: digit reversal, binary search counting, pet records, linked list, stack, tree flattening and Bulls and Cows."""

__version__ = "0.1.0"
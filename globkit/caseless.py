'''
Character comparisons that ignore case.

Both sides are upper-cased before comparing, so 'a' == 'A' and 'ä' == 'Ä'.
'''
def chars_equal(a, b) -> bool:
    return a == b or a.upper() == b.upper()

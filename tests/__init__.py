"""
Only the root tests directory carries an __init__.py, so that pytest imports it as the
`tests` package and shared helpers resolve as `tests.helpers.*`.

Test subdirectories are namespace packages (PEP 420); keep test module names unique.
"""

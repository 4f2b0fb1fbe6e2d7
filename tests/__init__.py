"""
Only the root tests directory carries an __init__.py.

Test subdirectories rely on implicit namespace packages (PEP 420), which keeps
the tree free of empty files. Test module names must therefore stay unique.
"""

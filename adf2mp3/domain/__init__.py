"""
Core domain models of the converter.

Modules:
    exceptions.py: The exception hierarchy. Every failure of a conversion is
                   raised as a subclass of `Adf2Mp3Exception`, so the entry
                   point can report it uniformly.
    file_stats.py: `FileStats`, a snapshot of the size and kind of the input
                   path taken before anything is opened.
"""

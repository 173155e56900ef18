"""Small algorithms, bit tricks, toy ciphers, checksums, an SQLite book catalogue and a TCP chat room."""

__version__ = "0.1.0"
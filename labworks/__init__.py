"""Small console tools and building blocks: bitmap info, byte flipping, matrix
inversion, text replacement, file comparison, a car simulator, a calculator
engine, rationals, URL errors, find_max and a linked list."""

__version__ = "0.1.0"
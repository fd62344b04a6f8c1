"""Classic data structures and algorithms: linked and circular lists, a
priority queue, bounded stack and queue, polynomials, infix/postfix
expressions, interval unions, Bellman-Ford shortest paths, divide-and-conquer
max/min and an odd-number triangle."""

__version__ = "0.1.0"
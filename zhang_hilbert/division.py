# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Side-length division used by the pseudo-Hilbert scan of Zhang et al.,
"A Pseudo-Hilbert Scan for Arbitrarily-Sized Arrays".

Every recursion level cuts a side ``n`` into ``(n1, n2)``, where ``n1`` is a
power of two close to ``n / 2``. For ``n >= 3`` ``n1`` is even and ``n2`` keeps
the parity of ``n``; the curve-type table relies on that.

``division`` computes ``n1`` with one mask instead of the doubling loop of the
paper (``reference_division``). The two disagree only for ``n = 3 * 2**k``,
where ``division`` picks ``n1 = 2**(k + 1)`` and the paper picks ``2**k``:

    >>> division(24), reference_division(24)
    ((16, 8), (8, 16))
"""


def log2_floor(n):
    assert n >= 1, f"log2_floor is undefined for {n}"
    return n.bit_length() - 1


def division(n):
    """
    Split a side of length ``n >= 2`` into ``(n1, n2)``, power-of-two part first.
    """
    if n < 2:
        raise ValueError(f"a side of length {n} can not be divided")
    mask = 1 << (log2_floor(n) - 1)
    n1 = (n & mask) + mask
    return n1, n - n1


def reference_division(n):
    """
    The split as defined in the paper: the smallest power of two ``p`` with
    ``3 * p >= n``. Kept to document where ``division`` deviates from it.
    """
    if n < 2:
        raise ValueError(f"a side of length {n} can not be divided")
    p = 1
    while 3 * p < n:
        p *= 2
    return p, n - p


def is_deviating_length(n):
    """True for ``n = 3 * 2**k``, the lengths where the two rules disagree."""
    if n < 3 or n % 3:
        return False
    q = n // 3
    return q & (q - 1) == 0


def division_count(major, minor):
    """
    Estimate how many near-square pieces a ``major x minor`` strip should be
    cut into along its major side.
    """
    if major <= minor:
        return 1
    k = major // minor
    d1 = major // k - minor
    d2 = minor - major // (k + 1)
    # pick whichever of k, k + 1 gives pieces closer to square
    return k if d1 < d2 else k + 1

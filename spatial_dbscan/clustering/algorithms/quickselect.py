# spatial_dbscan/clustering/algorithms/quickselect.py

import math

# Ranges larger than this are first narrowed to a sampled sub-range
SAMPLE_THRESHOLD = 600


def _natural_order(a, b):
    return (a > b) - (a < b)


def quick_select(arr, k, left=0, right=None, compare=None):
    """
    Floyd-Rivest selection: partially sorts arr in place around index k.

    After the call, arr[k] holds the element that would be at index k if
    arr[left:right + 1] were fully sorted, every element in [left, k) compares
    <= arr[k] and every element in (k, right] compares >= arr[k]. Elements
    outside [left, right] are left untouched.

    Args:
        arr (list): The mutable sequence to partially sort.
        k (int): Target rank index, left <= k <= right.
        left (int): First index of the range (inclusive).
        right (int): Last index of the range (inclusive). Defaults to len(arr) - 1.
        compare (callable): Three-way comparator returning <0, 0 or >0. When
            omitted the elements' natural ordering is used.

    Raises:
        TypeError: if no comparator is given and the elements are not orderable.

    Example:
        >>> arr = [65, 28, 59, 33, 21, 56, 22, 95, 50, 12, 90, 53, 28, 77, 39]
        >>> quick_select(arr, 8)
        >>> arr[8]
        53
    """
    if not arr:
        return
    if right is None:
        right = len(arr) - 1
    if compare is None:
        first = arr[left]
        if not hasattr(first, '__lt__') or first.__lt__(first) is NotImplemented:
            raise TypeError("Please either provide a comparator or use a list of orderable elements.")
        compare = _natural_order

    _select_step(arr, k, left, right, compare)


def _select_step(arr, k, left, right, compare):
    l = left
    r = right
    while r > l:
        if r - l > SAMPLE_THRESHOLD:
            # Recurse into a sample that still contains rank k with high probability
            n = r - l + 1
            m = k - l + 1
            z = math.log(n)
            s = 0.5 * math.exp(2 * z / 3)
            sd = 0.5 * math.sqrt(z * s * (n - s) / n) * (-1 if m - n / 2 < 0 else 1)
            new_left = max(l, math.floor(k - m * s / n + sd))
            new_right = min(r, math.floor(k + (n - m) * s / n + sd))
            _select_step(arr, k, new_left, new_right, compare)

        t = arr[k]
        i = l
        j = r

        arr[l], arr[k] = arr[k], arr[l]
        if compare(arr[r], t) > 0:
            arr[l], arr[r] = arr[r], arr[l]

        while i < j:
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
            j -= 1
            while compare(arr[i], t) < 0:
                i += 1
            while compare(arr[j], t) > 0:
                j -= 1

        if compare(arr[l], t) == 0:
            arr[l], arr[j] = arr[j], arr[l]
        else:
            j += 1
            arr[j], arr[r] = arr[r], arr[j]

        if j <= k:
            l = j + 1
        if k <= j:
            r = j - 1

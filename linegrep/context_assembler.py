from linegrep.models import OutputEntry


def window_bounds(hit, window, length):
    """Inclusive [start, end] of the window around a hit, clipped to the buffer."""
    return max(0, hit - window.before), min(length - 1, hit + window.after)


def assemble(buffer, hits, window):
    """
    Expands every hit into its before/after window over the whole buffer,
    merges the windows and returns one OutputEntry per selected index in
    ascending order.
    """
    length = len(buffer)
    hit_set = set(hits)
    for hit in hit_set:
        if not 0 <= hit < length:
            raise IndexError(f"hit index {hit} outside buffer of {length} lines")

    if window.is_empty:
        selected = hit_set
    else:
        selected = set()
        for hit in hit_set:
            start, end = window_bounds(hit, window, length)
            selected.update(range(start, end + 1))

    return tuple(
        OutputEntry(index, buffer[index].text, index in hit_set)
        for index in sorted(selected)
    )

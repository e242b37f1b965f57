def format_entry(entry, number=False):
    if number:
        return f"{entry.index + 1}: {entry.text}"
    return entry.text


def format_count(count):
    return str(count)

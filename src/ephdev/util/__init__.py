def unique(iterable):
    '''
    Returns list of iterable items without duplicates, preserving order
    '''
    seen = set()
    ret = []
    for item in iterable:
        if item not in seen:
            seen.add(item)
            ret.append(item)
    return ret

import collections

import more_itertools

def group_by(iterable, key):
    result = collections.defaultdict(list)
    for value in iterable:
        result[key(value)].append(value)
    return result

def dfs(root, children):
    # Preorder traversal with an explicit stack, so long chains do not hit
    # the recursion limit.
    visited = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node not in visited:
            visited.add(node)
            yield node
            stack.extend(reversed(list(children(node))))

def unique(iterable):
    # Keeps the first occurrence of each value, in order.
    return list(more_itertools.unique_everseen(iterable))

"""Simplification of absolute Unix-style paths."""


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix path.

    Empty components and ``.`` are dropped, ``..`` removes the previous
    component (never going above the root), and the result starts with a
    single ``/`` and has no trailing slash.
    """
    stack: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return "/" + "/".join(stack)
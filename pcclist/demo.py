"""Small demonstration of the mixed-type list."""

from __future__ import annotations

from collections.abc import Sequence

from pcclist.anylist import List


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print its results."""
    lst = List(42, "hello", 3.14)

    lst.append(13.37)
    lst.append("world")
    lst.append(42)

    a = lst[0].cast(int)
    b = lst[1].cast(str)
    c = lst[2].cast(float)

    print(f"0: {a}")
    print(f"1: {b}")
    print(f"2: {format(c, 'g')}")
    print(f"length: {lst.size()}")

    for value in lst:
        print(f"  - {value}")

    lst[0] = 100
    lst[1] = "world"

    print("After assignment:")
    print(f"0: {lst[0]}")
    print(f"1: {lst[1]}")

    try:
        lst[5]
    except IndexError as exc:
        print(f"Caught: {exc}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
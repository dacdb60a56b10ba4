"""Application code exercised by the sample tests."""


def maybe_print() -> None:
    print("maybe")

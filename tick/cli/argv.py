def expand_multi(args: list[str], long_flag: str, short_flag: str | None = None) -> list[str]:
    """Rewrite `-t a b c` as `-t a -t b -t c` so typer sees one value per flag.

    Values are consumed until the next argument starting with "-" or a literal "--".

    Args:
        args: Argument list (without program name)
        long_flag: Long form (e.g., "--tags")
        short_flag: Short form (e.g., "-t")

    Returns:
        New argument list; args is not modified.
    """
    flags = [long_flag]
    if short_flag:
        flags.append(short_flag)

    out: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            out.extend(args[i:])
            break
        if arg not in flags:
            out.append(arg)
            i += 1
            continue

        i += 1
        values = []
        while i < len(args) and not args[i].startswith("-"):
            values.append(args[i])
            i += 1
        if not values:
            out.append(arg)
        for value in values:
            out.extend([arg, value])
    return out

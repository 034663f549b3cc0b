"""Style presets and modifiers, one character per TableComponent in order.

In a preset a space means "not drawn"; in a modifier it means "unchanged".
"""

ASCII_FULL = "||--+==+|-+||++++++"
ASCII_FULL_CONDENSED = "||--+==+|    ++++++"
ASCII_NO_BORDERS = "     == |-+        "
ASCII_BORDERS_ONLY = "||--+==+   ||--++++"
ASCII_BORDERS_ONLY_CONDENSED = "||--+==+     --++++"
ASCII_HORIZONTAL_ONLY = "  -- ==  --  --    "
ASCII_MARKDOWN = "||  |-|||           "

UTF8_FULL = "││──╞═╪╡┆╌┼├┤┬┴┌┐└┘"
UTF8_FULL_CONDENSED = "││──╞═╪╡┆    ┬┴┌┐└┘"
UTF8_NO_BORDERS = "     ═╪ ┆╌┼        "
UTF8_BORDERS_ONLY = "││──╞══╡     ──┌┐└┘"
UTF8_HORIZONTAL_ONLY = "  ── ══  ──  ──    "

NOTHING = "                   "

# Modifiers
UTF8_ROUND_CORNERS = "               ╭╮╰╯"
UTF8_SOLID_INNER_BORDERS = "        │─         "
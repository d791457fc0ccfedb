"""Render BBCode to HTML in 3 lines: zero config, zero deps."""

from corchete import parse

html = parse("[b]Hello[/b] [color=red]World[/color]")
print(html)

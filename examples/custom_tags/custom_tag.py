"""Add your own tags: functions, handler objects or handler classes."""

from corchete import BBCode


def render_repo(raw, attributes, content):
    """Render [repo name="x"]label[/repo] as a GitHub link."""
    return f'<a href="https://github.com/{attributes["name"]}">{content}</a>'


class SpoilerTag:
    """Handler class, instantiated with the tag name it is registered under."""

    def __init__(self, name):
        self.name = name

    def render(self, tag, context):
        summary = tag.attributes.first("Spoiler")
        return f"<details><summary>{summary}</summary>{tag.content}</details>"


bbcode = BBCode().extend("repo", render_repo).extend("spoiler", SpoilerTag)

source = '[repo name="jgrossi/corcel"]Corcel[/repo] [spoiler=Ending][b]It was a dream[/b][/spoiler]'

print(bbcode(source))

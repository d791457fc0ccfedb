"""Configure URL templates for thread, post and quote links."""

from corchete import BBCode

bbcode = BBCode(
    {
        "thread_url": "https://forum.example.com/threads/{thread_id}",
        "post_url": "https://forum.example.com/posts/{post_id}",
        "user_url": "https://forum.example.com/members/{user_id}",
    }
)

source = """
[quote=Alice;269302]Has anyone tried the new release?[/quote]
See [thread=42]the release notes[/thread], or ask [name]Bob[/name].
"""

print(bbcode(source))

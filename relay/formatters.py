from .constants import UNHANDLED_EVENT_MESSAGE
from .events import EventKind, GitLabEvent


def format_tag_push(event: GitLabEvent) -> str:
    tag_name = event.tag_name
    parts = [f"**{event.user_name}** pushed a new tag **{tag_name}** in **{event.project.name}**:\n"]
    parts.append(f"🔗 **View tag**: <{event.project.web_url}/tags/{tag_name}>")
    return "\n".join(parts) + "\n"


def format_commit(commit, user_avatar):
    # O avatar exibido é sempre o do usuário que fez o push, não o do autor do commit
    return (
        f"• **Commit ID**: {commit.id}\n"
        f"  _by {commit.author.name}_ ![avatar]({user_avatar})\n"
        f"  [Commit URL]({commit.url})\n"
        f"  ```\n{commit.message}\n```\n"
    )


def format_push(event: GitLabEvent) -> str:
    parts = [f"**{event.user_name}** pushed to branch **{event.ref}** in **{event.project.name}**:\n\n"]
    for commit in event.commits:
        parts.append(format_commit(commit, event.user_avatar))
    parts.append(f"🔗 **View changes**: <{event.project.web_url}/commits/{event.after}>\n")
    return "".join(parts)


def format_merge_request(event: GitLabEvent) -> str:
    mr = event.merge_request
    parts = [f"**Merge Request**: **{mr.title}** in **{event.project.name}**"]
    parts.append(f"State: **{mr.state}**")
    parts.append(f"Author: _{mr.author.name}_ ![avatar]({event.user_avatar})")
    parts.append(f"🔗 **View Merge Request**: <{mr.url}>")
    return "\n".join(parts) + "\n"


def format_repository_update(event: GitLabEvent) -> str:
    parts = [f"**Repository** **{event.project.name}** was updated:"]
    parts.append(f"Updated by _{event.user_name}_ ![avatar]({event.user_avatar})")
    parts.append(f"🔗 **View Repository**: <{event.project.web_url}>")
    return "\n".join(parts) + "\n"


def format_unhandled(event: GitLabEvent) -> str:
    return UNHANDLED_EVENT_MESSAGE


FORMATTERS = {
    EventKind.TAG_PUSH: format_tag_push,
    EventKind.PUSH: format_push,
    EventKind.MERGE_REQUEST: format_merge_request,
    EventKind.REPOSITORY_UPDATE: format_repository_update,
    EventKind.UNKNOWN: format_unhandled,
}


def format_event(event: GitLabEvent) -> str:
    """Converte um evento do GitLab em uma mensagem Markdown para o Discord."""
    formatter = FORMATTERS.get(event.kind, format_unhandled)
    return formatter(event)

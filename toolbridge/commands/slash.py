"""
Structured (slash) command interpreter.

Commands are looked up in a registry keyed by name. Unknown names are not
errors: they produce a payload flagged with ``unknown=True``.
"""

from typing import Callable, Dict, List

from toolbridge.commands.models import SlashCommandPayload, SlashCommandResult

SlashHandler = Callable[[List[str]], SlashCommandPayload]

_slash_commands: Dict[str, SlashHandler] = {}


def register_slash_command(name: str) -> Callable[[SlashHandler], SlashHandler]:
    """
    Register a handler for ``/<name>``.

    Example:
        ```python
        @register_slash_command("theme")
        def _theme(args):
            return SlashCommandPayload(message="Theme changed")
        ```
    """
    def decorator(handler: SlashHandler) -> SlashHandler:
        _slash_commands[name] = handler
        return handler
    return decorator


def get_slash_command_names() -> List[str]:
    """Get the names of all registered slash commands, in registration order."""
    return list(_slash_commands.keys())


@register_slash_command("help")
def _help(args: List[str]) -> SlashCommandPayload:
    names = ", ".join(f"/{name}" for name in get_slash_command_names())
    return SlashCommandPayload(message=f"Available commands: {names}")


@register_slash_command("clear")
def _clear(args: List[str]) -> SlashCommandPayload:
    return SlashCommandPayload(message="Conversation cleared")


@register_slash_command("memory")
def _memory(args: List[str]) -> SlashCommandPayload:
    return SlashCommandPayload(
        message="Memory command processed",
        sub_command=args[0] if args else "show"
    )


@register_slash_command("chat")
def _chat(args: List[str]) -> SlashCommandPayload:
    return SlashCommandPayload(
        message="Chat command processed",
        sub_command=args[0] if args else "list"
    )


@register_slash_command("restore")
def _restore(args: List[str]) -> SlashCommandPayload:
    if args:
        return SlashCommandPayload(message=f"Restoring checkpoint {args[0]}", sub_command=args[0])
    return SlashCommandPayload(message="Restore command processed", sub_command="list")


@register_slash_command("compress")
def _compress(args: List[str]) -> SlashCommandPayload:
    return SlashCommandPayload(message="Chat history compressed")


@register_slash_command("stats")
def _stats(args: List[str]) -> SlashCommandPayload:
    return SlashCommandPayload(
        message="Session statistics requested",
        sub_command=args[0] if args else "session"
    )


async def process_slash_command(command: str) -> SlashCommandResult:
    """
    Process a slash command.

    Args:
        command: Raw command text, with or without the leading ``/``

    Returns:
        SlashCommandResult echoing the command name and its arguments
    """
    clean_command = command[1:] if command.startswith("/") else command

    parts = clean_command.split()
    command_name = parts[0] if parts else ""
    args = parts[1:]

    handler = _slash_commands.get(command_name)
    if handler is None:
        payload = SlashCommandPayload(message=f"Unknown command: {command_name}", unknown=True)
    else:
        payload = handler(args)

    return SlashCommandResult(command=command_name, args=args, result=payload)

"""Moderation bot — admin commands with arguments.

Demonstrates return_data/require_data, custom separators, permission
tiers, ``/cmd@BotName`` addressing, and a no-match reply.

Try it:
    tern routes bot:bot
    tern try bot:bot "block user1 3d" --admin
"""

from tern import Dispatcher

bot = Dispatcher()

banned: dict[str, str] = {}


@bot.command("/start", match_bot_name=True)
def start():
    return "Moderation bot ready."


@bot.command(["/ban", "block"], return_data=True, require_data=True, require_admin=True)
def ban(data):
    _text, user, *rest = data
    banned[user] = rest[0] if rest else "forever"
    return f"Banned {user} for {banned[user]}."


@bot.command("/unban", return_data=True, require_data=True, separator="_", require_admin=True)
def unban(data):
    user = data[1]
    banned.pop(user, None)
    return f"Unbanned {user}."


@bot.command("/purge", require_owner=True)
def purge():
    banned.clear()
    return "Ban list cleared."


@bot.command("/shutdown", require_env_admin=True)
def shutdown():
    return "Shutting down."


@bot.no_match
def unknown():
    return "Unknown command."

"""Help desk bot — typo-tolerant commands in Russian and English.

Demonstrates fuzzy matching with per-route temperature, Cyrillic
aliases, callback-query buttons, and async handlers.

Try it:
    tern try bot:bot "помощ"
"""

from tern import Dispatcher

bot = Dispatcher()

FAQ = {
    "hours": "We are open 9:00-18:00.",
    "price": "See the price list at /prices.",
}


@bot.command(["помощь", "help"], temperature=80)
async def help_():
    return "Ask me about: " + ", ".join(FAQ)


@bot.command("faq", return_data=True, require_data=True)
async def faq(data):
    topic = data[1]
    return FAQ.get(topic, f"No FAQ entry for {topic!r}.")


@bot.command(["menu:contacts", "contacts", "контакты"], separator=":", temperature=75)
def contacts():
    return "support@example.com"


@bot.no_match
async def fallback():
    return "Sorry, I did not understand. Try 'help'."

# -*- coding: utf-8 -*-
# cython: language_level=3
# Kura Examples - A collection of examples for Kura.
# Written in 2021 by Lucina Lucina@lmbyrne.dev
#
# To the extent possible under law, the author(s) have dedicated all copyright
# and related and neighboring rights to this software to the public domain worldwide.
# This software is distributed without any warranty.
#
# You should have received a copy of the CC0 Public Domain Dedication along with this software.
# If not, see <https://creativecommons.org/publicdomain/zero/1.0/>.
"""Examples of basic Redis usage."""
import os

import hikari

import kura

bot = hikari.GatewayBot(token=os.environ["BOT_TOKEN"], intents=kura.RedisCache.all_intents())
# Initiate a self-managing cache with all supplied resources.
cache = kura.RedisCache.from_url(
    os.environ["REDIS_ADDRESS"],
    password=os.environ.get("REDIS_PASSWORD"),
    event_manager=bot.event_manager,
    # When an event manager is passed here the client will register its own event listeners when started.
    event_managed=True,
    # The cache will be opened and closed alongside the bot.
)
prefix = os.environ["BOT_PREFIX"]


@bot.listen()
async def on_message(event: hikari.GuildMessageCreateEvent) -> None:
    if not event.message.content or not event.message.content.startswith(prefix) or not event.is_human:
        return

    arguments = event.message.content[len(prefix) :].split()
    if not arguments:
        return

    if arguments[0] == "member":
        try:
            member = await cache.get_member(event.guild_id, int(arguments[1]))

        except kura.EntryNotFound:
            await event.message.respond(content="Member not found.")

        except ValueError:
            await event.message.respond(content="Invalid ID passed.")

        except IndexError:
            await event.message.respond(content="Missing ID.")

        else:
            embed = (
                hikari.Embed(title=f"Member: {member.nickname or member.user.username}")
                .add_field(name="Roles", value=",".join(map(str, member.role_ids)) or "None")
                .add_field(name="Is bot", value=str(member.user.is_bot).lower())
            )
            if member.joined_at:
                embed.add_field(name="Joined server", value=member.joined_at.strftime("%d/%m/%y %H:%M %Z"))

            await event.message.respond(embed=embed)

    elif arguments[0] == "voice":
        try:
            channel_id = int(arguments[1])

        except (IndexError, ValueError):
            await event.message.respond(content="Missing or invalid channel ID.")
            return

        user_ids = await cache.get_channel_voice_state_ids(channel_id)
        await event.message.respond(content=f"{len(user_ids)} user(s) connected: {', '.join(map(str, user_ids))}")


bot.run()

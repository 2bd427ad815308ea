"""
main.py
-------
Entry point for the ReqKeeper Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import TELEGRAM_BOT_TOKEN
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.start_handler import start_command, help_command
from handlers.requirement_handler import (
    list_requirements_command,
    show_requirement_command,
    add_requirement_command,
    edit_requirement_command,
    delete_requirement_command,
    purge_requirements_command,
)
from repositories.requirement_repo import RequirementRepository
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "🚀 Start the bot"),
        BotCommand("help", "📖 Show help"),
        BotCommand("requirements", "📋 List requirements"),
        BotCommand("requirement", "📌 Show a requirement"),
        BotCommand("add_requirement", "➕ Add a requirement"),
        BotCommand("edit_requirement", "✏️ Edit a requirement"),
        BotCommand("delete_requirement", "🗑️ Delete a requirement"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(token: str = TELEGRAM_BOT_TOKEN) -> Application:
    """Build the Telegram application with every command handler registered."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("requirements", list_requirements_command))
    app.add_handler(CommandHandler("requirement", show_requirement_command))
    app.add_handler(CommandHandler("add_requirement", add_requirement_command))
    app.add_handler(CommandHandler("edit_requirement", edit_requirement_command))
    app.add_handler(CommandHandler("delete_requirement", delete_requirement_command))
    # Not listed in the command menu
    app.add_handler(CommandHandler("purge_requirements", purge_requirements_command))
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()
    logger.info(f"{RequirementRepository().count()} requirements stored.")

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application()

    # ── 3. Start polling ──────────────────────────────────
    logger.info("🚀 ReqKeeper is running! Press Ctrl+C to stop.")
    try:
        app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("ReqKeeper stopped.")


if __name__ == "__main__":
    main()

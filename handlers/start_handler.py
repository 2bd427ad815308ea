"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
🤖 *Welcome to ReqKeeper!*
Keep your project requirements in one place 📋

*🔧 Available commands:*
/requirements - list all requirements
/requirement <uuid> - show one requirement
/add\\_requirement <title> | <description> - add a requirement
/edit\\_requirement <uuid> <title> | <description> - edit a requirement
/delete\\_requirement <uuid> - delete a requirement
/purge\\_requirements <key> - delete every requirement
/help - show this message
"""


@rate_limited
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show welcome message."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")

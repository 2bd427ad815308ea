"""
handlers/requirement_handler.py
-------------------------------
Telegram commands for managing requirements.

Usage:
    /requirements                                  → list all requirements
    /requirement <uuid>                            → show one requirement
    /add_requirement <title> | <description>       → create
    /edit_requirement <uuid> <title> | <description> → replace title/description
    /delete_requirement <uuid>                     → delete
    /purge_requirements <key>                      → delete everything (key required)
"""

from telegram import Update
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from exceptions import RequirementAlreadyExistsException, ResourceNotFoundException
from models.requirement import RequirementDto
from services.requirement_service import RequirementService
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)
requirement_service = RequirementService()


def _parse_dto(text: str) -> RequirementDto | None:
    """
    Parse "<title> | <description>". The description is optional.
    Returns None when the title is empty.
    """
    title, _, description = text.partition("|")
    title = title.strip()
    if not title:
        return None
    return RequirementDto(title=title, description=description.strip() or None)


def _format_dto(dto: RequirementDto) -> str:
    """Render a requirement for a Markdown reply; user text is escaped."""
    lines = [f"📌 *{escape_markdown(dto.title)}*"]
    if dto.description:
        lines.append(escape_markdown(dto.description))
    return "\n".join(lines)


@rate_limited
async def list_requirements_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /requirements - list every stored requirement."""
    result = requirement_service.get_all_requirements()
    if not result.requirements:
        await update.message.reply_text("📭 No requirements yet.")
        return

    lines = [f"📋 *Requirements ({len(result)})*\n"]
    for i, dto in enumerate(result.requirements, start=1):
        lines.append(f"{i}. {escape_markdown(dto.title)}")
    await update.message.reply_text("\n".join(lines), parse_mode="Markdown")


@rate_limited
async def show_requirement_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /requirement <uuid>."""
    if not context.args:
        await update.message.reply_text("Usage: /requirement <uuid>")
        return

    try:
        dto = requirement_service.fetch_requirement(context.args[0])
    except ResourceNotFoundException as e:
        await update.message.reply_text(f"⚠️ {e}")
        return
    await update.message.reply_text(_format_dto(dto), parse_mode="Markdown")


@rate_limited
async def add_requirement_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /add_requirement <title> | <description>."""
    dto = _parse_dto(" ".join(context.args or []))
    if dto is None:
        await update.message.reply_text("Usage: /add_requirement <title> | <description>")
        return

    try:
        uuid = requirement_service.create_requirement(dto)
    except RequirementAlreadyExistsException as e:
        await update.message.reply_text(f"⚠️ {e}")
        return

    logger.info(f"User {update.effective_user.id} added requirement {uuid}")
    await update.message.reply_text(f"✅ Requirement created.\n🔖 `{uuid}`", parse_mode="Markdown")


@rate_limited
async def edit_requirement_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /edit_requirement <uuid> <title> | <description>."""
    args = context.args or []
    dto = _parse_dto(" ".join(args[1:])) if len(args) > 1 else None
    if dto is None:
        await update.message.reply_text("Usage: /edit_requirement <uuid> <title> | <description>")
        return

    try:
        requirement_service.update_requirement(args[0], dto)
    except ResourceNotFoundException as e:
        await update.message.reply_text(f"⚠️ {e}")
        return
    await update.message.reply_text("✏️ Requirement updated.")


@rate_limited
async def delete_requirement_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete_requirement <uuid>."""
    if not context.args:
        await update.message.reply_text("Usage: /delete_requirement <uuid>")
        return

    try:
        requirement_service.delete_requirement(context.args[0])
    except ResourceNotFoundException as e:
        await update.message.reply_text(f"⚠️ {e}")
        return
    await update.message.reply_text("🗑️ Requirement deleted.")


@rate_limited
async def purge_requirements_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /purge_requirements <key>."""
    key = context.args[0] if context.args else ""
    if requirement_service.delete_all_requirements(key):
        await update.message.reply_text("🧹 All requirements deleted.")
    else:
        logger.warning(f"User {update.effective_user.id} sent a wrong purge key")
        await update.message.reply_text("⛔ Invalid key. Nothing was deleted.")

"""
Menu composition: which addons and option groups a menu item offers, and
which options make up an option group.

Three association tables back this module:

* ``menu_item_addons`` carries ``is_default``, ``is_required`` and
  ``max_quantity`` (never below 1) and is unique per (menu item, addon).
* ``menu_item_option_groups`` and ``menu_option_group_options`` are plain
  many-to-many links.

Unlinking only removes the association row; removing something that is not
linked is a no-op. Deleting an addon, option or option group removes its
association rows first, and the whole delete runs in one transaction.
"""

from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.errors import StoreError
from backoffice.models.menu import (
    Addon,
    MenuItem,
    MenuItemAddon,
    MenuItemOptionGroup,
    MenuOption,
    OptionGroup,
    OptionGroupOption,
)
from backoffice.services.store import get_or_404, transaction

logger = structlog.get_logger()


def normalize_max_quantity(value: Optional[int]) -> int:
    """Unset, zero or negative quantities become 1"""
    if value is None or value < 1:
        return 1
    return value


def exclude_linked(candidates: Sequence[Any], linked_ids: Sequence[Any]) -> List[Any]:
    """Candidates whose id is not among ``linked_ids``, original order kept"""
    linked = set(linked_ids)
    return [candidate for candidate in candidates if candidate.id not in linked]


async def _run_steps(db: AsyncSession, steps: Sequence[Tuple[str, Any]]) -> None:
    for label, statement in steps:
        try:
            await db.execute(statement)
        except SQLAlchemyError as exc:
            logger.error("Cascading delete step failed", step=label, error=str(exc))
            raise StoreError(f"Failed to delete {label}: {exc}") from exc


# Addons

async def list_linked_addons(db: AsyncSession, menu_item_id: int) -> List[MenuItemAddon]:
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")
    result = await db.execute(
        select(MenuItemAddon).where(MenuItemAddon.menu_item_id == menu_item_id)
    )
    return list(result.scalars().unique().all())


async def list_available_addons(db: AsyncSession, menu_item_id: int) -> List[Addon]:
    """Addons that can still be linked to the menu item"""
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")

    addons = (await db.execute(select(Addon).order_by(Addon.name))).scalars().all()
    linked_ids = (
        await db.execute(
            select(MenuItemAddon.addon_id).where(MenuItemAddon.menu_item_id == menu_item_id)
        )
    ).scalars().all()

    return exclude_linked(addons, linked_ids)


async def link_addon(
    db: AsyncSession,
    menu_item_id: int,
    addon_id: UUID,
    is_default: bool = False,
    is_required: bool = False,
    max_quantity: Optional[int] = None,
) -> MenuItemAddon:
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")
    addon = await get_or_404(db, Addon, addon_id, "Addon")

    link = MenuItemAddon(
        menu_item_id=menu_item_id,
        addon=addon,
        is_default=is_default,
        is_required=is_required,
        max_quantity=normalize_max_quantity(max_quantity),
    )
    async with transaction(db, "Link addon", "Addon is already linked to this menu item"):
        db.add(link)

    logger.info("Addon linked", menu_item_id=menu_item_id, addon_id=str(addon_id))
    return link


async def update_addon_link(
    db: AsyncSession,
    link_id: UUID,
    is_default: bool = False,
    is_required: bool = False,
    max_quantity: Optional[int] = None,
) -> MenuItemAddon:
    link = await get_or_404(db, MenuItemAddon, link_id, "Menu item addon")

    async with transaction(db, "Update addon link"):
        link.is_default = is_default
        link.is_required = is_required
        link.max_quantity = normalize_max_quantity(max_quantity)

    return link


async def unlink_addon(db: AsyncSession, menu_item_id: int, link_id: UUID) -> int:
    """Delete an addon link of this menu item; returns the number of rows removed"""
    async with transaction(db, "Unlink addon"):
        result = await db.execute(
            delete(MenuItemAddon).where(
                MenuItemAddon.id == link_id,
                MenuItemAddon.menu_item_id == menu_item_id,
            )
        )
    return result.rowcount


async def unlink_addon_from_item(db: AsyncSession, menu_item_id: int, addon_id: UUID) -> int:
    async with transaction(db, "Unlink addon"):
        result = await db.execute(
            delete(MenuItemAddon).where(
                MenuItemAddon.menu_item_id == menu_item_id,
                MenuItemAddon.addon_id == addon_id,
            )
        )
    return result.rowcount


async def delete_addon(db: AsyncSession, addon_id: UUID) -> None:
    await get_or_404(db, Addon, addon_id, "Addon")

    async with transaction(db, "Delete addon"):
        await _run_steps(db, [
            ("menu item addon links", delete(MenuItemAddon).where(MenuItemAddon.addon_id == addon_id)),
            ("addon", delete(Addon).where(Addon.id == addon_id)),
        ])

    logger.info("Addon deleted", addon_id=str(addon_id))


# Option groups on menu items

async def list_linked_option_groups(db: AsyncSession, menu_item_id: int) -> List[OptionGroup]:
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")
    result = await db.execute(
        select(OptionGroup)
        .join(MenuItemOptionGroup, MenuItemOptionGroup.option_group_id == OptionGroup.id)
        .where(MenuItemOptionGroup.menu_item_id == menu_item_id)
        .order_by(OptionGroup.name)
    )
    return list(result.scalars().all())


async def list_available_option_groups(db: AsyncSession, menu_item_id: int) -> List[OptionGroup]:
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")

    groups = (await db.execute(select(OptionGroup).order_by(OptionGroup.name))).scalars().all()
    linked_ids = (
        await db.execute(
            select(MenuItemOptionGroup.option_group_id)
            .where(MenuItemOptionGroup.menu_item_id == menu_item_id)
        )
    ).scalars().all()

    return exclude_linked(groups, linked_ids)


async def link_option_group(db: AsyncSession, menu_item_id: int, option_group_id: UUID) -> OptionGroup:
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")
    group = await get_or_404(db, OptionGroup, option_group_id, "Option group")

    async with transaction(db, "Link option group", "Option group is already linked to this menu item"):
        db.add(MenuItemOptionGroup(menu_item_id=menu_item_id, option_group_id=option_group_id))

    logger.info("Option group linked", menu_item_id=menu_item_id, option_group_id=str(option_group_id))
    return group


async def unlink_option_group(db: AsyncSession, menu_item_id: int, option_group_id: UUID) -> int:
    async with transaction(db, "Unlink option group"):
        result = await db.execute(
            delete(MenuItemOptionGroup).where(
                MenuItemOptionGroup.menu_item_id == menu_item_id,
                MenuItemOptionGroup.option_group_id == option_group_id,
            )
        )
    return result.rowcount


# Options inside option groups

async def list_group_options(db: AsyncSession, option_group_id: UUID) -> List[MenuOption]:
    await get_or_404(db, OptionGroup, option_group_id, "Option group")
    result = await db.execute(
        select(MenuOption)
        .join(OptionGroupOption, OptionGroupOption.option_id == MenuOption.id)
        .where(OptionGroupOption.option_group_id == option_group_id)
        .order_by(MenuOption.name)
    )
    return list(result.scalars().all())


async def list_available_options(db: AsyncSession, option_group_id: UUID) -> List[MenuOption]:
    await get_or_404(db, OptionGroup, option_group_id, "Option group")

    options = (await db.execute(select(MenuOption).order_by(MenuOption.name))).scalars().all()
    linked_ids = (
        await db.execute(
            select(OptionGroupOption.option_id)
            .where(OptionGroupOption.option_group_id == option_group_id)
        )
    ).scalars().all()

    return exclude_linked(options, linked_ids)


async def link_option(db: AsyncSession, option_group_id: UUID, option_id: UUID) -> MenuOption:
    await get_or_404(db, OptionGroup, option_group_id, "Option group")
    option = await get_or_404(db, MenuOption, option_id, "Menu option")

    async with transaction(db, "Link option", "Option is already part of this option group"):
        db.add(OptionGroupOption(option_group_id=option_group_id, option_id=option_id))

    return option


async def unlink_option(db: AsyncSession, option_group_id: UUID, option_id: UUID) -> int:
    async with transaction(db, "Unlink option"):
        result = await db.execute(
            delete(OptionGroupOption).where(
                OptionGroupOption.option_group_id == option_group_id,
                OptionGroupOption.option_id == option_id,
            )
        )
    return result.rowcount


# Cascading deletes

async def delete_option_group(db: AsyncSession, option_group_id: UUID) -> None:
    """Delete an option group together with all of its association rows"""
    await get_or_404(db, OptionGroup, option_group_id, "Option group")

    async with transaction(db, "Delete option group"):
        await _run_steps(db, [
            (
                "option group options",
                delete(OptionGroupOption).where(OptionGroupOption.option_group_id == option_group_id),
            ),
            (
                "menu item option groups",
                delete(MenuItemOptionGroup).where(MenuItemOptionGroup.option_group_id == option_group_id),
            ),
            ("option group", delete(OptionGroup).where(OptionGroup.id == option_group_id)),
        ])

    logger.info("Option group deleted", option_group_id=str(option_group_id))


async def delete_menu_option(db: AsyncSession, option_id: UUID) -> None:
    await get_or_404(db, MenuOption, option_id, "Menu option")

    async with transaction(db, "Delete menu option"):
        await _run_steps(db, [
            ("option group options", delete(OptionGroupOption).where(OptionGroupOption.option_id == option_id)),
            ("menu option", delete(MenuOption).where(MenuOption.id == option_id)),
        ])


async def delete_menu_item(db: AsyncSession, menu_item_id: int) -> None:
    await get_or_404(db, MenuItem, menu_item_id, "Menu item")

    async with transaction(db, "Delete menu item"):
        await _run_steps(db, [
            ("menu item addons", delete(MenuItemAddon).where(MenuItemAddon.menu_item_id == menu_item_id)),
            (
                "menu item option groups",
                delete(MenuItemOptionGroup).where(MenuItemOptionGroup.menu_item_id == menu_item_id),
            ),
            ("menu item", delete(MenuItem).where(MenuItem.id == menu_item_id)),
        ])

    logger.info("Menu item deleted", menu_item_id=menu_item_id)

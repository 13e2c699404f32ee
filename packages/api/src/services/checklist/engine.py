# This project was developed with assistance from AI tools.
"""Checklist generation.

Evaluates the rule catalog against an application snapshot and produces the
per-borrower, per-property and shared document lists plus internal flags.
The engine is pure: the only ambient input is today's date, read once when
the caller does not supply an evaluation date.

Rule predicate failures never abort generation. They become warnings that
name the rule id and the failing predicate, never borrower data.
"""

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from db.enums import ChecklistScope, ChecklistStage, InternalFlagType

from ...core.config import settings
from ...schemas.application import AddressRecord, ApplicationPayload, PropertyRecord
from ...schemas.checklist import (
    BorrowerChecklist,
    ChecklistItem,
    ChecklistStats,
    GeneratedChecklist,
    InternalFlag,
    PropertyChecklist,
)
from .context import RuleContext, build_contexts, find_subject_property
from .dedupe import deduplicate_items
from .rules import ALL_RULES, Rule

logger = logging.getLogger(__name__)


def local_today() -> date:
    """Today in the brokerage's timezone."""
    return datetime.now(ZoneInfo(settings.CHECKLIST_TIMEZONE)).date()


def evaluate_rule(rule: Rule, ctx: RuleContext) -> tuple[ChecklistItem | None, str | None]:
    """Evaluate one rule for one context.

    Returns:
        (item, warning). At most one of the two is set; both are None when the
        rule does not fire or is excluded.
    """
    try:
        fired = rule.condition(ctx)
    except Exception as exc:
        logger.warning("Rule %s condition raised %s", rule.id, type(exc).__name__)
        return None, f"Rule {rule.id} condition error: {type(exc).__name__}"

    if not fired:
        return None, None

    if rule.exclude_when is not None:
        try:
            excluded = rule.exclude_when(ctx)
        except Exception as exc:
            logger.warning("Rule %s excludeWhen raised %s", rule.id, type(exc).__name__)
            return None, f"Rule {rule.id} excludeWhen error: {type(exc).__name__}"
        if excluded:
            return None, None

    item = ChecklistItem(
        rule_id=rule.id,
        document=rule.document,
        display_name=rule.label(ctx.evaluation_date),
        stage=rule.stage,
        for_email=rule.for_email,
        section=rule.section,
        notes=rule.notes,
    )
    return item, None


def to_internal_flag(item: ChecklistItem, rule: Rule, borrower_name: str | None = None) -> InternalFlag:
    return InternalFlag(
        rule_id=item.rule_id,
        description=item.document,
        type=InternalFlagType.INTERNAL_CHECK if rule.internal_check_note else InternalFlagType.DEFERRED_DOC,
        borrower_name=borrower_name or None,
        check_note=rule.internal_check_note,
    )


def describe_property(
    prop: PropertyRecord,
    addresses: Sequence[AddressRecord],
    is_subject: bool,
    non_subject_index: int,
    non_subject_count: int,
) -> str:
    """Human-readable label for a property checklist.

    Uses the linked address when it has any street part or city, else a
    positional fallback ("Subject Property", "Additional Property [N]").
    """
    address = next((a for a in addresses if prop.address_id and a.id == prop.address_id), None)
    if address is not None:
        street = " ".join(p for p in (address.street_number, address.street_name, address.street_type) if p)
        if street and address.city:
            return f"{street}, {address.city}"
        if street:
            return street
        if address.city:
            return address.city

    if is_subject:
        return "Subject Property"
    if non_subject_count > 1:
        return f"Additional Property {non_subject_index + 1}"
    return "Additional Property"


def _evaluate_target(
    rules: Sequence[Rule],
    ctx: RuleContext,
    warnings: list[str],
) -> list[ChecklistItem]:
    items: list[ChecklistItem] = []
    for rule in rules:
        item, warning = evaluate_rule(rule, ctx)
        if warning:
            warnings.append(warning)
        if item is not None:
            items.append(item)
    return deduplicate_items(items)


def _partition(
    items: list[ChecklistItem],
    rules_by_id: dict[str, Rule],
    internal_flags: list[InternalFlag],
    borrower_name: str | None = None,
) -> list[ChecklistItem]:
    """Split off internal items as flags; return the client-facing rest."""
    client: list[ChecklistItem] = []
    for item in items:
        if item.for_email:
            client.append(item)
            continue
        rule = rules_by_id.get(item.rule_id)
        if rule is not None:
            internal_flags.append(to_internal_flag(item, rule, borrower_name))
    return client


def compute_stats(
    borrower_checklists: Sequence[BorrowerChecklist],
    property_checklists: Sequence[PropertyChecklist],
    shared_items: Sequence[ChecklistItem],
    internal_flag_count: int,
    warning_count: int,
) -> ChecklistStats:
    client_items = [item for bc in borrower_checklists for item in bc.items]
    client_items += [item for pc in property_checklists for item in pc.items]
    client_items += list(shared_items)
    return ChecklistStats(
        total_items=len(client_items) + internal_flag_count,
        pre_items=sum(1 for i in client_items if i.stage == ChecklistStage.PRE),
        full_items=sum(1 for i in client_items if i.stage == ChecklistStage.FULL),
        per_borrower_items=sum(len(bc.items) for bc in borrower_checklists),
        shared_items=len(shared_items),
        internal_flags=internal_flag_count,
        warnings=warning_count,
    )


def generate_checklist(
    application: ApplicationPayload,
    rules: Sequence[Rule] = ALL_RULES,
    evaluation_date: date | None = None,
) -> GeneratedChecklist:
    """Generate the document checklist for one application snapshot.

    Args:
        application: Application payload.
        rules: Rule catalog; tests pass subsets.
        evaluation_date: Date that drives tax-year labels. Defaults to today.

    Returns:
        The generated checklist. Identical inputs give identical output
        apart from ``generated_at``.
    """
    if evaluation_date is None:
        evaluation_date = local_today()

    contexts, warnings = build_contexts(application, evaluation_date)
    rules_by_id: dict[str, Rule] = {}
    for rule in rules:
        rules_by_id.setdefault(rule.id, rule)

    per_borrower = [r for r in rules if r.scope == ChecklistScope.PER_BORROWER]
    per_property = [r for r in rules if r.scope == ChecklistScope.PER_PROPERTY]
    shared = [r for r in rules if r.scope == ChecklistScope.SHARED]

    property_id = application.application.property_id
    if property_id and find_subject_property(application) is None:
        logger.warning("Application %s subject property %s not found", application.application.id, property_id)
        warnings.append(
            f'Subject property not found: application.propertyId "{property_id}" '
            "does not match any property in response"
        )

    internal_flags: list[InternalFlag] = []
    borrower_checklists: list[BorrowerChecklist] = []
    for ctx in contexts:
        name = ctx.borrower.full_name
        items = _evaluate_target(per_borrower, ctx, warnings)
        borrower_checklists.append(
            BorrowerChecklist(
                borrower_id=ctx.borrower.id,
                borrower_name=name,
                is_main_borrower=ctx.borrower.is_main_borrower,
                items=tuple(_partition(items, rules_by_id, internal_flags, name)),
            )
        )

    property_checklists: list[PropertyChecklist] = []
    shared_items: list[ChecklistItem] = []
    main_ctx = contexts[0] if contexts else None
    if main_ctx is not None:
        non_subject_count = sum(1 for p in application.properties if p.id != property_id)
        non_subject_index = 0
        for prop in application.properties:
            is_subject = prop.id == property_id
            description = describe_property(
                prop,
                application.addresses,
                is_subject,
                0 if is_subject else non_subject_index,
                non_subject_count,
            )
            if not is_subject:
                non_subject_index += 1

            items = _evaluate_target(per_property, main_ctx, warnings)
            client = _partition(items, rules_by_id, internal_flags)
            if client:
                property_checklists.append(
                    PropertyChecklist(
                        property_id=prop.id,
                        property_description=description,
                        items=tuple(client),
                    )
                )

        items = _evaluate_target(shared, main_ctx, warnings)
        shared_items = _partition(items, rules_by_id, internal_flags)

    stats = compute_stats(borrower_checklists, property_checklists, shared_items, len(internal_flags), len(warnings))
    logger.info(
        "Generated checklist for application %s: %d items, %d internal flags, %d warnings",
        application.application.id,
        stats.total_items,
        stats.internal_flags,
        stats.warnings,
    )
    return GeneratedChecklist(
        application_id=application.application.id,
        generated_at=datetime.now(UTC),
        borrower_checklists=tuple(borrower_checklists),
        property_checklists=tuple(property_checklists),
        shared_items=tuple(shared_items),
        internal_flags=tuple(internal_flags),
        warnings=tuple(warnings),
        stats=stats,
    )

"""Daily task generation from the task rule table."""

import logging
from collections.abc import Iterable
from datetime import date, datetime, time
from uuid import UUID

from babymind.models import Baby, Domain, Task, TaskBundle, TaskCategory
from babymind.rules import RuleEngine

logger = logging.getLogger(__name__)


def task_key(task: Task) -> tuple[UUID, TaskCategory, date]:
    """Identity of a generated task: one per baby, category and day."""
    return (task.baby_id, task.category, task.scheduled_at.date())


class DailyTaskGenerator:
    """Synthesizes today's tasks for a baby. Safe to call repeatedly."""

    def __init__(self, rule_engine: RuleEngine) -> None:
        self._rules = rule_engine

    def generate_daily_tasks(
        self,
        baby: Baby,
        existing_tasks: Iterable[Task],
        today: date,
    ) -> list[Task]:
        """Return only newly created tasks; existing (baby, category, today) keys are skipped."""
        bundle = self._rules.resolve(Domain.TASK, baby.age_in_months(today))
        if not isinstance(bundle, TaskBundle):
            raise TypeError(f"task rule payload must be TaskBundle, got {type(bundle).__name__}")

        taken = {task_key(t) for t in existing_tasks if t.baby_id == baby.id}
        weekday = today.isoweekday()
        start_of_day = datetime.combine(today, time.min)

        created: list[Task] = []
        for template in bundle.templates:
            if not template.applies_on(weekday):
                continue
            key = (baby.id, template.category, today)
            if key in taken:
                continue
            reminder_at = None
            if template.reminder_hour is not None:
                reminder_at = datetime.combine(today, time(hour=template.reminder_hour))
            task = Task(
                baby_id=baby.id,
                title=template.title,
                description=template.description,
                category=template.category,
                priority=template.priority,
                points=template.points,
                scheduled_at=start_of_day,
                reminder_at=reminder_at,
            )
            taken.add(key)
            created.append(task)

        if created:
            logger.info(
                "Generated %d tasks for baby %s on %s (%s)",
                len(created),
                baby.id,
                today,
                bundle.age_range_label,
            )
        return created

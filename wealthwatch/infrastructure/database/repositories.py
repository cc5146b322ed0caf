"""Data access layer for finance records"""

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from sqlalchemy.orm import Session
from wealthwatch.infrastructure.database.models import (
    Base,
    BudgetRecord,
    DebtRecord,
    GoalRecord,
    SettingRecord,
    TransactionRecord,
)
from wealthwatch.domain.models import Budget, BudgetStatus, Debt, Goal, Transaction
from wealthwatch.domain.exceptions import InvalidRecordError

DEFAULT_SETTINGS: Dict[str, Any] = {
    "currency": "USD",
    "theme": "light",
    "notifications": True,
    "auto_backup": False,
}

RecordT = TypeVar("RecordT", bound=Base)
DomainT = TypeVar("DomainT")


class RecordRepository(Generic[RecordT, DomainT]):
    """CRUD over one entity table, returning domain dataclasses"""

    model: Type[RecordT]
    entity: str

    def __init__(self, db: Session):
        self.db = db

    def to_domain(self, row: RecordT) -> DomainT:
        raise NotImplementedError

    def apply_defaults(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Creation-time defaults for optional fields"""
        return fields

    def get_all(self) -> List[DomainT]:
        rows = self.db.query(self.model).order_by(self.model.created_at).all()
        return [self.to_domain(row) for row in rows]

    def get(self, record_id: str) -> Optional[DomainT]:
        row = self.db.get(self.model, record_id)
        return self.to_domain(row) if row else None

    def add(self, **fields: Any) -> DomainT:
        """Persist a new record; the id is generated"""
        self._check_fields(fields)
        row = self.model(**self.apply_defaults(dict(fields)))
        self.db.add(row)
        self.db.flush()  # Get ID without committing
        return self.to_domain(row)

    def update(self, record_id: str, **changes: Any) -> Optional[DomainT]:
        """Apply a partial update; returns None when the id is unknown"""
        self._check_fields(changes)
        row = self.db.get(self.model, record_id)
        if row is None:
            return None
        for name, value in changes.items():
            setattr(row, name, value)
        self.db.flush()
        return self.to_domain(row)

    def delete(self, record_id: str) -> bool:
        row = self.db.get(self.model, record_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    def _check_fields(self, fields: Dict[str, Any]) -> None:
        columns = set(self.model.__table__.columns.keys()) - {"id", "created_at"}
        unknown = sorted(set(fields) - columns)
        if unknown:
            raise InvalidRecordError(f"Unknown {self.entity} fields: {', '.join(unknown)}")


class TransactionRepository(RecordRepository[TransactionRecord, Transaction]):
    """Repository for income and expense transactions"""

    model = TransactionRecord
    entity = "transaction"

    def to_domain(self, row: TransactionRecord) -> Transaction:
        return Transaction(
            id=row.id,
            amount=row.amount,
            type=row.type,
            category=row.category,
            subcategory=row.subcategory,
            date=row.date,
            description=row.description or "",
            tags=tuple(row.tags or ()),
            recurring=bool(row.recurring),
            recurring_interval=row.recurring_interval,
        )

    def apply_defaults(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        if fields.get("tags") is not None:
            fields["tags"] = list(fields["tags"])
        return fields


class DebtRepository(RecordRepository[DebtRecord, Debt]):
    """Repository for debts"""

    model = DebtRecord
    entity = "debt"

    def to_domain(self, row: DebtRecord) -> Debt:
        return Debt(
            id=row.id,
            lender_name=row.lender_name,
            amount=row.amount,
            current_balance=row.current_balance,
            due_date=row.due_date,
            interest_rate=row.interest_rate,
            minimum_payment=row.minimum_payment,
            description=row.description or "",
            status=row.status,
        )

    def apply_defaults(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """New debts start active with the full principal outstanding"""
        fields["status"] = "active"
        if fields.get("current_balance") is None:
            fields["current_balance"] = fields.get("amount")
        return fields


class BudgetRepository(RecordRepository[BudgetRecord, Budget]):
    """Repository for category budgets"""

    model = BudgetRecord
    entity = "budget"

    def to_domain(self, row: BudgetRecord) -> Budget:
        return Budget(
            id=row.id,
            category=row.category,
            limit=row.limit,
            spent=row.spent,
            period=row.period,
            alert_threshold=row.alert_threshold,
            color=row.color,
        )

    def apply_defaults(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields["spent"] = 0.0
        return fields

    def sync_spent(self, statuses: Sequence[BudgetStatus]) -> int:
        """Persist recomputed spending that differs from the stored value; returns rows changed"""
        changed = 0
        for status in statuses:
            if status.spent != status.budget.spent:
                self.update(status.budget.id, spent=status.spent)
                changed += 1
        return changed


class GoalRepository(RecordRepository[GoalRecord, Goal]):
    """Repository for savings goals"""

    model = GoalRecord
    entity = "goal"

    def to_domain(self, row: GoalRecord) -> Goal:
        return Goal(
            id=row.id,
            name=row.name,
            target_amount=row.target_amount,
            current_amount=row.current_amount,
            target_date=row.target_date,
            category=row.category,
            description=row.description,
            priority=row.priority,
            status=row.status,
        )

    def apply_defaults(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields["status"] = "active"
        if fields.get("current_amount") is None:
            fields["current_amount"] = 0.0
        return fields


class SettingsRepository:
    """Key/value user preferences merged over defaults"""

    def __init__(self, db: Session):
        self.db = db

    def get(self) -> Dict[str, Any]:
        stored = {row.key: row.value for row in self.db.query(SettingRecord).all()}
        return {**DEFAULT_SETTINGS, **stored}

    def save(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Replace all stored settings"""
        self.db.query(SettingRecord).delete()
        for key, value in values.items():
            self.db.add(SettingRecord(key=key, value=value))
        self.db.flush()
        return self.get()


def export_all_data(db: Session) -> Dict[str, Any]:
    """Snapshot of every record plus settings, for backup"""
    return {
        "transactions": [asdict(t) for t in TransactionRepository(db).get_all()],
        "debts": [asdict(d) for d in DebtRepository(db).get_all()],
        "budgets": [asdict(b) for b in BudgetRepository(db).get_all()],
        "goals": [asdict(g) for g in GoalRepository(db).get_all()],
        "settings": SettingsRepository(db).get(),
        "export_date": datetime.now(timezone.utc).isoformat(),
    }


def clear_all_data(db: Session) -> None:
    """Delete every record and stored setting"""
    for model in (TransactionRecord, DebtRecord, BudgetRecord, GoalRecord, SettingRecord):
        db.query(model).delete()
    db.flush()

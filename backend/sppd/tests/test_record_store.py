"""
Tests for the SQLAlchemy record store and guarded master data deletes.
"""
import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError as SchemaValidationError
from sppd.core.exceptions import NotFoundError, ReferentialIntegrityError, ValidationError
from sppd.models.assignment import TravelType
from sppd.schemas.assignment import Assignment, CostLine
from sppd.schemas.traveler import TravelerUpdate
from sppd.services import master_data_service
from sppd.services.assignment_service import save_assignment
from sppd.services.cost_derivation_service import CostDerivationEngine, start_draft
from sppd.tests.factories import make_budget_line


@pytest.fixture
def seeded(store, travelers, lombok_timur_rates, bima_rates):
    """Store holding the two travelers, both rate entries and one budget line."""
    saved = [store.upsert_traveler(t.model_copy(update={"id": None})) for t in travelers]
    store.upsert_rate_entry(lombok_timur_rates)
    store.upsert_rate_entry(bima_rates)
    store.upsert_budget_line(make_budget_line("5.1.02", 10000000, "6.000.000"))
    return saved


def _assignment(traveler_ids, **fields):
    values = dict(
        budget_line_code="5.1.02",
        travel_type=TravelType.WITHIN_REGION,
        destination="Lombok Timur",
        start_date=date(2024, 1, 10),
        end_date=date(2024, 1, 12),
        duration_days=3,
        traveler_ids=traveler_ids,
        cost_lines=[
            CostLine(traveler_id=tid, daily_allowance=Decimal(150000), daily_days=3, lodging_days=2)
            for tid in traveler_ids
        ],
    )
    values.update(fields)
    return Assignment(**values)


def test_traveler_round_trip(store, seeded):
    first, second = seeded
    assert first.id is not None

    loaded = store.get_traveler(first.id)

    assert loaded.name == "Baiq Nurul Aini"
    assert loaded.representation_within == Decimal(100000)
    assert [t.name for t in store.list_travelers()] == ["Baiq Nurul Aini", "Lalu Muhammad Zaini"]


def test_get_missing_records_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.get_traveler(404)
    with pytest.raises(NotFoundError):
        store.get_budget_line("9.9.99")
    with pytest.raises(NotFoundError):
        store.get_rate_entry("Atlantis")
    with pytest.raises(NotFoundError):
        store.get_assignment(404)


def test_budget_line_upsert_replaces_by_code(store, seeded):
    store.upsert_budget_line(make_budget_line("5.1.02", 12000000, "7.000.000", name="Koordinasi"))

    lines = store.list_budget_lines()

    assert len(lines) == 1
    assert lines[0].name == "Koordinasi"
    assert lines[0].budget_ceiling == Decimal(12000000)
    assert lines[0].disbursement_ceiling_amount == Decimal(7000000)


def test_rate_entry_upsert_replaces_whole_entry(store, seeded, lombok_timur_rates):
    store.upsert_rate_entry(lombok_timur_rates.model_copy(update={"lodging": Decimal(325000)}))

    entry = store.get_rate_entry("Lombok Timur")

    assert entry.lodging == Decimal(325000)
    assert entry.daily_allowance == Decimal(150000)
    assert len(store.list_rate_entries()) == 2


def test_assignment_round_trip_keeps_traveler_order(store, seeded):
    first, second = seeded
    saved = store.upsert_assignment(_assignment([second.id, first.id]))

    loaded = store.get_assignment(saved.id)

    assert loaded.traveler_ids == [second.id, first.id]
    assert [line.traveler_id for line in loaded.cost_lines] == [second.id, first.id]
    assert loaded.cost_lines[0].daily_allowance == Decimal(150000)
    assert loaded.travel_type == TravelType.WITHIN_REGION
    assert loaded.start_date == date(2024, 1, 10)


def test_resaving_assignment_replaces_cost_lines(store, seeded):
    first, second = seeded
    saved = store.upsert_assignment(_assignment([first.id, second.id]))

    edited = _assignment([second.id], id=saved.id, destination="Bima")
    store.upsert_assignment(edited)

    loaded = store.get_assignment(saved.id)
    assert loaded.destination == "Bima"
    assert loaded.traveler_ids == [second.id]
    assert len(store.list_assignments()) == 1


def test_upsert_unknown_assignment_id_raises_not_found(store, seeded):
    first, _ = seeded
    with pytest.raises(NotFoundError):
        store.upsert_assignment(_assignment([first.id], id=999))


def test_assignments_listed_latest_departure_first(store, seeded):
    first, _ = seeded
    store.upsert_assignment(_assignment([first.id], start_date=date(2024, 1, 5), end_date=date(2024, 1, 5)))
    store.upsert_assignment(_assignment([first.id], start_date=date(2024, 3, 1), end_date=date(2024, 3, 2)))

    starts = [a.start_date for a in store.list_assignments()]

    assert starts == [date(2024, 3, 1), date(2024, 1, 5)]


def test_referenced_master_data_cannot_be_deleted(store, seeded):
    first, second = seeded
    saved = store.upsert_assignment(_assignment([first.id]))

    with pytest.raises(ReferentialIntegrityError) as exc_info:
        master_data_service.delete_budget_line("5.1.02", store)
    assert exc_info.value.assignment_ids == [saved.id]

    with pytest.raises(ReferentialIntegrityError):
        master_data_service.delete_rate_entry("Lombok Timur", store)
    with pytest.raises(ReferentialIntegrityError):
        master_data_service.delete_traveler(first.id, store)

    assert store.get_budget_line("5.1.02").code == "5.1.02"
    assert store.get_rate_entry("Lombok Timur").destination == "Lombok Timur"


def test_unreferenced_master_data_can_be_deleted(store, seeded):
    first, second = seeded
    store.upsert_assignment(_assignment([first.id]))

    master_data_service.delete_rate_entry("Bima", store)
    master_data_service.delete_traveler(second.id, store)

    assert [e.destination for e in store.list_rate_entries()] == ["Lombok Timur"]
    assert [t.id for t in store.list_travelers()] == [first.id]


def test_deleting_assignment_releases_budget_line(store, seeded):
    first, _ = seeded
    saved = store.upsert_assignment(_assignment([first.id]))

    store.delete_assignment(saved.id)
    master_data_service.delete_budget_line("5.1.02", store)

    assert store.list_budget_lines() == []


def test_delete_missing_master_data_raises_not_found(store):
    with pytest.raises(NotFoundError):
        master_data_service.delete_budget_line("0.0.00", store)
    with pytest.raises(NotFoundError):
        master_data_service.delete_traveler(12, store)


def test_update_traveler_changes_only_given_fields(store, seeded):
    first, _ = seeded

    updated = master_data_service.update_traveler(
        first.id, TravelerUpdate(representation_outside=Decimal(175000)), store
    )

    assert updated.representation_outside == Decimal(175000)
    assert updated.representation_within == Decimal(100000)
    assert updated.name == "Baiq Nurul Aini"


def _priced_draft(store, traveler_ids):
    engine = CostDerivationEngine(store.list_rate_entries(), store.list_travelers())
    draft = start_draft()
    engine.set_dates(draft, date(2024, 1, 10), date(2024, 1, 12))
    engine.set_destination(draft, "Lombok Timur")
    for traveler_id in traveler_ids:
        engine.toggle_traveler(draft, traveler_id)
    draft.budget_line_code = "5.1.02"
    return draft


def test_save_assignment_persists_priced_draft(store, seeded):
    first, _ = seeded

    saved = save_assignment(_priced_draft(store, [first.id]), store)

    line = store.get_assignment(saved.id).cost_lines[0]
    assert line.lodging == Decimal(300000)
    assert (line.daily_days, line.lodging_days) == (3, 2)


def test_save_assignment_rejects_incomplete_drafts(store, seeded):
    first, _ = seeded

    draft = _priced_draft(store, [first.id])
    draft.budget_line_code = ""
    with pytest.raises(ValidationError):
        save_assignment(draft, store)

    draft = _priced_draft(store, [first.id])
    draft.budget_line_code = "9.9.99"
    with pytest.raises(NotFoundError):
        save_assignment(draft, store)

    with pytest.raises(ValidationError):
        save_assignment(_priced_draft(store, []), store)

    draft = _priced_draft(store, [first.id])
    draft.destination = "Bali"
    with pytest.raises(ValidationError):
        save_assignment(draft, store)

    draft = _priced_draft(store, [first.id])
    draft.end_date = None
    with pytest.raises(ValidationError):
        save_assignment(draft, store)

    assert store.list_assignments() == []


def test_update_traveler_rejects_blank_name(store, seeded):
    first, _ = seeded

    with pytest.raises(SchemaValidationError):
        TravelerUpdate(name="")
    with pytest.raises(SchemaValidationError):
        master_data_service.update_traveler(first.id, TravelerUpdate.model_construct(name=""), store)

    assert store.get_traveler(first.id).name == "Baiq Nurul Aini"

import pytest

from leaderboard.models import OrderType, User, empty_snapshot, snapshot_to_dict
from leaderboard.services import (
    Period,
    adjust_points,
    get_leaderboard,
    get_leaderboard_for_period,
    get_summary,
    get_user_by_code,
    get_user_stats,
    parse_period,
    register_user,
)
from leaderboard.services.points import INVALID_OPERATION, SAVE_CHANGES_FAILED, USER_NOT_FOUND
from leaderboard.services.users import (
    CODE_ALPHABET,
    CODE_LENGTH,
    DUPLICATE_NAME,
    INTERNAL_ERROR,
    NAME_REQUIRED,
    SAVE_USER_FAILED,
    generate_code,
)
from leaderboard.storage.keyvalue import encode_fields


def _register(store, name):
    result = register_user(store, name)
    assert result.success, result.message
    return result.codigo_usuario


def test_register_returns_code_and_persists(store):
    result = register_user(store, "  Alice  ")
    assert result.success
    assert result.message == "Usuario Alice registrado exitosamente"
    assert len(result.codigo_usuario) == CODE_LENGTH
    assert set(result.codigo_usuario) <= set(CODE_ALPHABET)

    user = get_user_by_code(store, result.codigo_usuario)
    assert user.nombre == "Alice"
    assert user.puntos == 0


def test_duplicate_name_is_case_insensitive(store):
    _register(store, "Bob")
    result = register_user(store, "bob")
    assert not result.success
    assert result.message == DUPLICATE_NAME
    assert result.codigo_usuario is None
    assert len(store.load().usuarios) == 1


def test_duplicate_check_ignores_surrounding_spaces(store):
    _register(store, "Carol")
    assert register_user(store, " CAROL ").message == DUPLICATE_NAME


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_name_is_rejected(store, name):
    result = register_user(store, name)
    assert not result.success
    assert result.message == NAME_REQUIRED
    assert store.load().usuarios == []


def test_long_names_are_accepted(store):
    name = "x" * 120
    result = register_user(store, name)
    assert result.success
    assert get_user_by_code(store, result.codigo_usuario).nombre == name


def test_codes_are_unique(store):
    codes = [_register(store, f"player{i}") for i in range(25)]
    assert len(set(codes)) == len(codes)


def test_generate_code_skips_taken(monkeypatch):
    picks = iter("a" * CODE_LENGTH + "b" * CODE_LENGTH)
    monkeypatch.setattr("leaderboard.services.users.secrets.choice", lambda alphabet: next(picks))
    assert generate_code({"a" * CODE_LENGTH}) == "b" * CODE_LENGTH


def test_register_reports_save_failure(write_failing_store):
    result = register_user(write_failing_store, "Dave")
    assert not result.success
    assert result.message == SAVE_USER_FAILED


def test_register_reports_load_failure(read_failing_store):
    result = register_user(read_failing_store, "Dave")
    assert result.message == INTERNAL_ERROR


def test_alice_scenario(store):
    code = _register(store, "Alice")

    assert adjust_points(store, code, "suma").puntos == 1
    assert adjust_points(store, code, "resta").puntos == 0

    result = adjust_points(store, code, OrderType.RESTA)
    assert result.success
    assert result.puntos == 0
    assert result.message == "Puntos restados correctamente"
    assert len(store.load().ordenes) == 3


def test_points_never_negative(store):
    code = _register(store, "Eve")
    operations = ["resta", "suma", "suma", "resta", "resta", "resta", "suma", "suma", "suma", "resta"]

    expected = 0
    for operation in operations:
        if operation == "suma":
            expected += 1
        elif expected > 0:
            expected -= 1
        result = adjust_points(store, code, operation)
        assert result.puntos == expected
        assert result.puntos >= 0

    assert get_user_by_code(store, code).puntos == expected


def test_orders_record_kind_and_owner(store):
    code = _register(store, "Frank")
    adjust_points(store, code, "suma")
    snapshot = store.load()
    user = snapshot.usuarios[0]
    (order,) = snapshot.ordenes
    assert order.tipo is OrderType.SUMA
    assert order.usuario_id == user.id
    assert order.codigo_usuario == code
    assert user.fecha_actualizacion == order.fecha


def test_unknown_code_records_nothing(store):
    _register(store, "Grace")
    result = adjust_points(store, "nope", "suma")
    assert not result.success
    assert result.message == USER_NOT_FOUND
    assert result.puntos is None
    assert store.load().ordenes == []


@pytest.mark.parametrize("operation", ["multiplica", "", None, ["suma"]])
def test_invalid_operation_is_a_failure_result(store, operation):
    code = _register(store, "Ivy")
    result = adjust_points(store, code, operation)
    assert not result.success
    assert result.message == INVALID_OPERATION
    assert result.puntos is None
    assert store.load().ordenes == []
    assert get_user_by_code(store, code).puntos == 0


def test_adjust_reports_save_failure(write_failing_store):
    snapshot = empty_snapshot()
    snapshot.usuarios.append(User(nombre="Hank", codigo_usuario="hank000000"))
    write_failing_store.data.update(encode_fields("", snapshot_to_dict(snapshot)))

    result = adjust_points(write_failing_store, "hank000000", "suma")
    assert not result.success
    assert result.message == SAVE_CHANGES_FAILED


def test_leaderboard_sorted_and_stable(store):
    codes = {name: _register(store, name) for name in ["Ann", "Ben", "Cid", "Dee"]}
    adjust_points(store, codes["Cid"], "suma")
    adjust_points(store, codes["Cid"], "suma")
    adjust_points(store, codes["Ben"], "suma")
    adjust_points(store, codes["Dee"], "suma")

    first = [user.nombre for user in get_leaderboard(store)]
    assert first == ["Cid", "Ben", "Dee", "Ann"]
    for _ in range(3):
        assert [user.nombre for user in get_leaderboard(store)] == first


@pytest.mark.parametrize("period", ["dia", "semana", "mes", "total"])
def test_period_leaderboard_matches_lifetime(store, period):
    a = _register(store, "Ann")
    _register(store, "Ben")
    adjust_points(store, a, "suma")
    by_period = [user.nombre for user in get_leaderboard_for_period(store, period)]
    assert by_period == [user.nombre for user in get_leaderboard(store)]


@pytest.mark.parametrize("raw", [None, "", "year", "TOTAL"])
def test_unknown_period_means_total(raw):
    assert parse_period(raw) is Period.TOTAL


def test_known_periods_parse():
    assert parse_period("semana") is Period.SEMANA


def test_unknown_period_leaderboard_matches_lifetime(store):
    _register(store, "Ann")
    _register(store, "Ben")
    adjust_points(store, _register(store, "Cid"), "suma")
    assert [u.nombre for u in get_leaderboard_for_period(store, "year")] == ["Cid", "Ann", "Ben"]


def test_user_stats(store):
    code = _register(store, "Stat")
    other = _register(store, "Other")
    for operation in ["suma", "suma", "suma", "resta"]:
        adjust_points(store, code, operation)
    adjust_points(store, other, "suma")

    stats = get_user_stats(store, code)
    assert stats.nombre == "Stat"
    assert stats.puntos == 2
    assert stats.ordenes_total == 4
    assert stats.ordenes_hoy == stats.ordenes_semana == stats.ordenes_mes == 2


def test_user_stats_unknown_code(store):
    assert get_user_stats(store, "missing") is None
    assert get_user_by_code(store, "missing") is None


def test_summary(store):
    a = _register(store, "Ann")
    b = _register(store, "Ben")
    adjust_points(store, a, "suma")
    adjust_points(store, b, "suma")
    adjust_points(store, b, "resta")

    summary = get_summary(store)
    assert summary.total_usuarios == 2
    assert summary.total_puntos == 1
    assert summary.total_ordenes == 3
    assert summary.promedio_puntos == 1


def test_summary_average_rounds_half_up(store):
    a = _register(store, "Ann")
    _register(store, "Ben")
    adjust_points(store, a, "suma")
    assert get_summary(store).promedio_puntos == 1


def test_summary_of_empty_store(store):
    summary = get_summary(store)
    assert summary.total_usuarios == 0
    assert summary.promedio_puntos == 0

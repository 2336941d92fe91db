import itertools
import json

import pytest

from common import covers_all, tickets_coverage
from proof_fullcover import prove
from psychic import (
    InvalidInputError,
    LottoPsychicInput,
    load_tickets,
    lotto_psychic,
    main,
    save_tickets,
    solve,
)
from tickets import ticket_numbers


def collect(params):
    reported = []
    lotto_psychic(params, sink=lambda i, numbers: reported.append((i, numbers)))
    return reported


def test_covers_every_pair_of_five():
    reported = collect(LottoPsychicInput(n=5, k=3, j=0, l=2))
    assert reported == [
        (1, (1, 2, 3)),
        (2, (1, 4, 5)),
        (3, (2, 4, 5)),
        (4, (3, 4, 5)),
    ]
    tickets = [set(t) for _, t in reported]
    for pair in itertools.combinations(range(1, 6), 2):
        assert any(set(pair) <= t for t in tickets)


def test_free_slots_reported_as_zero():
    reported = collect(LottoPsychicInput(n=4, k=3, j=0, l=2))
    assert [t for _, t in reported] == [(1, 2, 3), (1, 2, 4), (3, 4, 0)]


def test_every_ticket_has_k_numbers():
    for _, numbers in collect(LottoPsychicInput(n=7, k=4, j=0, l=3)):
        assert len(numbers) == 4


def test_deterministic():
    params = LottoPsychicInput(n=8, k=5, j=2, l=3)
    assert solve(params) == solve(params)


def test_j_is_inert():
    a = solve(LottoPsychicInput(n=7, k=4, j=0, l=2))
    b = solve(LottoPsychicInput(n=7, k=4, j=3, l=2))
    assert a == b


def test_l_equals_n_single_ticket():
    assert [ticket_numbers(t) for t in solve(LottoPsychicInput(n=3, k=3, j=0, l=3))] == [(1, 2, 3)]
    assert [ticket_numbers(t) for t in solve(LottoPsychicInput(n=3, k=5, j=0, l=3))] == [(1, 2, 3, 0, 0)]


def test_l_greater_than_n_is_invalid():
    reported = []
    with pytest.raises(InvalidInputError) as err:
        lotto_psychic(LottoPsychicInput(n=3, k=5, j=0, l=4), sink=lambda i, t: reported.append(t))
    assert err.value.params.l == 4
    assert reported == []


def test_ticket_smaller_than_subset_is_invalid():
    with pytest.raises(InvalidInputError):
        solve(LottoPsychicInput(n=6, k=2, j=0, l=3))


def test_full_cover_on_larger_runs():
    for n, k, l in [(9, 5, 3), (10, 6, 2), (8, 4, 4), (12, 6, 3)]:
        tickets = [ticket_numbers(t) for t in solve(LottoPsychicInput(n=n, k=k, j=0, l=l), progress=True)]
        assert covers_all(tickets, n, l)
        assert prove(tickets, n, l)


def test_default_sink_prints_ticket_block(capsys):
    lotto_psychic(LottoPsychicInput(n=3, k=2, j=0, l=2))
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "<Tickets>"
    assert out[-1] == "</Tickets>"
    assert out[1].startswith("Ticket n°1")
    assert out[2] == "1 2"


def test_save_and_load_tickets(tmp_path):
    tickets = [(1, 2, 3), (3, 4, 0)]
    filename = save_tickets(tickets, str(tmp_path / "set.txt"))
    assert load_tickets(filename) == tickets


def test_main_writes_json(tmp_path, capsys):
    out = tmp_path / "tickets.json"
    tickets = main(["--n", "5", "--k", "3", "--l", "2", "--out", str(out), "--verify"])
    assert json.loads(out.read_text()) == [list(t) for t in tickets]
    assert load_tickets(str(out)) == tickets
    assert "FULL COVER" in capsys.readouterr().out


def test_main_rejects_invalid_input():
    with pytest.raises(SystemExit) as err:
        main(["--n", "3", "--k", "3", "--l", "4"])
    assert err.value.code == 2


def test_partial_cover_is_reported():
    assert not covers_all([(1, 2, 3)], 5, 2)
    assert tickets_coverage([(1, 2, 3)], 5, 2) == 3
    assert not prove([(1, 2, 3)], 5, 2)

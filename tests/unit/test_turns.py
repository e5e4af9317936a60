"""Unit tests for turn scaling and the turn controller."""

import pytest

from coldwar import parameters as p
from coldwar.engine.context import EngineContext, TurnCounters
from coldwar.engine.turns import (
    TurnController,
    document_count,
    ensure_encrypted,
    interruption_chance,
    max_intel_points,
)
from coldwar.models.documents import Document, DocumentCategory


class TestLookupByTurn:
    def test_open_ended_bucket(self):
        assert p.lookup_by_turn(((2, "a"), (None, "b")), 99) == "b"

    def test_inclusive_upper_bound(self):
        assert p.lookup_by_turn(((2, "a"), (None, "b")), 2) == "a"

    def test_missing_final_bucket(self):
        with pytest.raises(ValueError):
            p.lookup_by_turn(((2, "a"),), 3)


class TestScaling:
    @pytest.mark.parametrize(
        "turn,chance",
        [(1, 0.0), (2, 0.0), (3, 0.15), (5, 0.15), (6, 0.30), (10, 0.30), (11, 0.50), (30, 0.50)],
    )
    def test_interruption_chance(self, turn, chance):
        assert interruption_chance(turn) == chance

    @pytest.mark.parametrize("turn,count", [(1, 3), (3, 3), (4, 4), (6, 4), (7, 5), (20, 5)])
    def test_document_count(self, turn, count):
        assert document_count(turn) == count

    @pytest.mark.parametrize("turn,intel", [(1, 1), (2, 1), (3, 2), (5, 2), (6, 3), (20, 3)])
    def test_max_intel_points(self, turn, intel):
        assert max_intel_points(turn) == intel


class TestTurnCounters:
    def test_reset_refills_and_clears(self):
        counters = TurnCounters()
        counters.reset(3, True)
        counters.charge(2)
        counters.trace_count = 2
        counters.traced_advisors.append("General Volkov")
        counters.consult_count = 1

        counters.reset(2, False)
        assert counters.intel_points == 2
        assert counters.max_intel_points == 2
        assert counters.interruption_active is False
        assert counters.trace_count == 0
        assert counters.traced_advisors == []
        assert counters.consult_count == 0

    def test_charge_beyond_budget_raises(self):
        counters = TurnCounters()
        counters.reset(1, False)
        with pytest.raises(ValueError):
            counters.charge(2)

    def test_refund_never_exceeds_maximum(self):
        counters = TurnCounters()
        counters.reset(2, False)
        counters.refund(1)
        assert counters.intel_points == 2


class TestEnsureEncrypted:
    def _doc(self, doc_id, encrypted=False):
        return Document(id=doc_id, category=DocumentCategory.INTERNAL_MEMO, is_encrypted=encrypted)

    def test_flips_first_document(self):
        docs = [self._doc("DOC-0001"), self._doc("DOC-0002")]
        assert ensure_encrypted(docs) is True
        assert docs[0].is_encrypted
        assert not docs[1].is_encrypted

    def test_leaves_batch_with_encrypted_document(self):
        docs = [self._doc("DOC-0001"), self._doc("DOC-0002", encrypted=True)]
        assert ensure_encrypted(docs) is False
        assert not docs[0].is_encrypted

    def test_empty_batch(self):
        assert ensure_encrypted([]) is False


class TestTurnController:
    def test_fresh_controller_has_one_mole(self):
        controller = TurnController(random_seed=3)
        assert controller.turn == 0
        assert sum(a.is_mole for a in controller.state.advisors) == 1

    def test_start_turn_advances_and_resets(self, fixed_generator):
        controller = TurnController(generator=fixed_generator, random_seed=1)
        controller.start_turn()
        assert controller.turn == 1
        assert controller.context.counters.intel_points == 1
        assert controller.context.counters.interruption_active is False
        assert fixed_generator.calls == [(3, 1)]

    def test_documents_replaced_each_turn(self, fixed_generator):
        controller = TurnController(generator=fixed_generator, random_seed=1)
        controller.start_turn()
        first = controller.documents
        first[0].is_encrypted = False
        controller.start_turn()
        assert controller.documents is not first
        assert controller.documents[0].is_encrypted

    def test_batch_always_has_encrypted_document(self):
        controller = TurnController(random_seed=21)
        for _ in range(15):
            controller.start_turn()
            assert any(d.is_encrypted for d in controller.documents)
            assert len(controller.documents) == document_count(controller.turn)

    def test_budget_follows_turn_table(self, fixed_generator):
        controller = TurnController(generator=fixed_generator, random_seed=2)
        for _ in range(7):
            controller.start_turn()
            counters = controller.context.counters
            assert counters.intel_points == max_intel_points(controller.turn)
            assert counters.max_intel_points == counters.intel_points

    def test_interrupt_uses_turn_probability(self, scripted_rng, make_world, fixed_generator):
        ctx = EngineContext(state=make_world(), rng=scripted_rng([True]), turn=10)
        controller = TurnController(context=ctx, generator=fixed_generator)
        controller.start_turn()
        assert controller.turn == 11
        assert ctx.counters.interruption_active is True
        assert ctx.counters.intel_points == 3

    def test_deterministic_for_seed(self):
        a = TurnController(random_seed=99)
        b = TurnController(random_seed=99)
        for _ in range(5):
            a.start_turn()
            b.start_turn()
        assert [d.id for d in a.documents] == [d.id for d in b.documents]
        assert a.context.counters.interruption_active == b.context.counters.interruption_active
        assert a.state.mole.name == b.state.mole.name

import unittest

from mc_sandbox.core.outcome_store import OutcomeStore
from mc_sandbox.models.outcome import Outcome


class OutcomeStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = OutcomeStore()

    def test_append_grows_store(self) -> None:
        self.assertEqual(self.store.size(), 0)
        self.assertEqual(self.store.append(Outcome(sum=3, values=(1, 2))), 1)
        self.assertEqual(self.store.append(Outcome(sum=7, values=(3, 4))), 2)
        self.assertEqual(len(self.store), 2)

    def test_snapshot_is_decoupled_from_later_appends(self) -> None:
        self.store.append(Outcome(sum=2, values=(1, 1)))
        snapshot = self.store.snapshot()
        self.store.append(Outcome(sum=12, values=(6, 6)))
        self.assertIsInstance(snapshot, tuple)
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(self.store.size(), 2)

    def test_snapshot_preserves_append_order(self) -> None:
        outcomes = [Outcome(sum=value, values=(value,)) for value in (4, 1, 6, 2)]
        for outcome in outcomes:
            self.store.append(outcome)
        self.assertEqual(list(self.store.snapshot()), outcomes)

    def test_reset_clears_without_touching_old_snapshots(self) -> None:
        self.store.append(Outcome(sum=5, values=(5,)))
        snapshot = self.store.snapshot()
        self.store.reset()
        self.assertEqual(self.store.size(), 0)
        self.assertEqual(self.store.snapshot(), ())
        self.assertEqual(len(snapshot), 1)


if __name__ == "__main__":
    unittest.main()

import threading
import time
import unittest

from mc_sandbox.core.outcome_store import OutcomeStore
from mc_sandbox.models.outcome import Outcome
from mc_sandbox.models.progress import RunState
from mc_sandbox.runtime.progress_sampler import ProgressSampler


class ProgressSamplerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = OutcomeStore()
        self.published = []
        self.sampler = ProgressSampler(
            self.store,
            run_id=3,
            target=10,
            state_provider=lambda: RunState.RUNNING,
            interval=0.01,
            publish=self.published.append,
        )

    def test_sample_publishes_aggregated_snapshot(self) -> None:
        self.store.append(Outcome(sum=7, values=(3, 4)))
        self.store.append(Outcome(sum=7, values=(1, 6)))
        snapshot = self.sampler.sample()
        self.assertEqual(self.published, [snapshot])
        self.assertIs(self.sampler.latest, snapshot)
        self.assertEqual(snapshot.run_id, 3)
        self.assertEqual(snapshot.completed, 2)
        self.assertEqual(snapshot.target, 10)
        self.assertAlmostEqual(snapshot.progress_fraction, 0.2)
        self.assertEqual(snapshot.distribution, {7: 100.0})
        self.assertEqual(snapshot.expected_value, 7.0)

    def test_snapshot_not_affected_by_later_appends(self) -> None:
        snapshot = self.sampler.sample()
        self.store.append(Outcome(sum=2, values=(1, 1)))
        self.assertEqual(snapshot.completed, 0)
        self.assertEqual(snapshot.outcomes, ())
        self.assertEqual(snapshot.expected_value, 0)

    def test_run_samples_until_stopped(self) -> None:
        stop_event = threading.Event()
        lock = threading.RLock()
        worker = threading.Thread(target=self.sampler.run, args=(stop_event, lock))
        worker.start()
        time.sleep(0.1)
        stop_event.set()
        worker.join(timeout=1.0)
        self.assertFalse(worker.is_alive())
        taken = len(self.published)
        self.assertGreaterEqual(taken, 2)
        time.sleep(0.05)
        self.assertEqual(len(self.published), taken)

    def test_rejects_non_positive_interval(self) -> None:
        with self.assertRaises(ValueError):
            ProgressSampler(self.store, run_id=1, target=1, state_provider=lambda: RunState.RUNNING, interval=0)


if __name__ == "__main__":
    unittest.main()

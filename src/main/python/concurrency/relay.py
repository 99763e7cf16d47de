from __future__ import annotations

from PyQt5.QtCore import QCoreApplication, QEvent, QObject, Qt, pyqtSignal, pyqtSlot

import logging

from util.observable_list import ChangeObserver, ObservableList


class DeferredChangeRelay(QObject):
	"""
	Forwards splice notifications to an observer on a later event loop turn.

	Attached to an ObservableList in place of the observer itself, so the
	observer sees an edit only once control is back in the Qt event loop,
	never while the mutating call is still running.
	"""
	changed = pyqtSignal(int, int, int)

	observer: ChangeObserver
	pending: int

	def __init__(self, observer: ChangeObserver):
		super().__init__()
		self.observer = observer
		self.pending = 0
		self.changed.connect(self._deliver, Qt.QueuedConnection)

	def notify_change(self, index: int, removed: int, inserted: int):
		self.pending += 1
		self.changed.emit(index, removed, inserted)

	@pyqtSlot(int, int, int)
	def _deliver(self, index: int, removed: int, inserted: int):
		self.pending -= 1
		self.observer.notify_change(index, removed, inserted)

	def flush(self):
		# delivers queued changes now instead of waiting for the event loop
		if self.pending:
			QCoreApplication.sendPostedEvents(self, QEvent.MetaCall)

	def __str__(self):
		return f"relay to {self.observer!r}"


def observe_deferred(sequence: ObservableList, observer: ChangeObserver) -> DeferredChangeRelay:
	sequence.detach(observer)
	relay = DeferredChangeRelay(observer)
	sequence.attach(relay)
	logging.info(f"[DEFERRED] {str(relay)}")
	return relay

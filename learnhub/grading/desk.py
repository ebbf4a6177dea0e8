"""
learnhub/grading/desk.py

Simulated grading for open-text and voice-recording activities.

  1. Explicit jobs      : every submission becomes a GradingJob running on
                          its own background thread, keyed by socket sid.
  2. Cancellable delay  : the artificial latency is an Event wait, so a
                          cancel wakes the job immediately.
  3. No stale results   : a job cancelled before delivery never records
                          progress and never emits; disconnecting or leaving
                          the activity cancels everything pending for that sid.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from threading import Event, Lock
from typing import Callable, Dict, List, Optional, Tuple, Union
from uuid import uuid4

from flask import current_app, request
from flask_socketio import emit

from learnhub import socketio
from learnhub.grading.feedback import count_words, open_text_feedback, voice_feedback
from learnhub.learn.content import (
    DEFAULT_MIN_DURATION, DEFAULT_MIN_WORDS, get_module, validate_activity,
)
from learnhub.learn.utils import finish_activity
from learnhub.progress.tracker import ProgressTracker
from learnhub.state import current_progress, profile_id
from learnhub.storage import ProfileStorage

log = logging.getLogger(__name__)


@dataclass
class GradingJob:
    sid: str
    activity_id: str
    delay: float
    id: str = field(default_factory=lambda: uuid4().hex)
    cancelled: Event = field(default_factory=Event)
    finished: Event = field(default_factory=Event)


class GradingDesk:
    def __init__(self) -> None:
        self._lock = Lock()
        self.pending: Dict[str, List[GradingJob]] = {}

    def submit(self, sid: str, activity_id: str, delay: float,
               grade: Callable[[], str],
               deliver: Callable[[str], None],
               fail: Optional[Callable[[Exception], None]] = None) -> GradingJob:
        job = GradingJob(sid=sid, activity_id=activity_id, delay=delay)
        with self._lock:
            self.pending.setdefault(sid, []).append(job)
        return self._start(job, grade, deliver, fail)

    def submit_unless_pending(self, sid: str, activity_id: str, delay: float,
                              grade: Callable[[], str],
                              deliver: Callable[[str], None],
                              fail: Optional[Callable[[Exception], None]] = None
                              ) -> Optional[GradingJob]:
        """Like submit, but None if sid already has a job for activity_id."""
        job = GradingJob(sid=sid, activity_id=activity_id, delay=delay)
        with self._lock:
            jobs = self.pending.setdefault(sid, [])
            if any(j.activity_id == activity_id for j in jobs):
                return None
            jobs.append(job)
        return self._start(job, grade, deliver, fail)

    def _start(self, job: GradingJob, grade, deliver, fail) -> GradingJob:
        threading.Thread(
            target=self._run, args=(job, grade, deliver, fail), daemon=True
        ).start()
        return job

    def _run(self, job: GradingJob, grade, deliver, fail) -> None:
        try:
            if job.cancelled.wait(job.delay):
                return
            feedback = grade()
            with self._lock:
                if job.cancelled.is_set():
                    return
                self._forget(job)
            deliver(feedback)
        except Exception as exc:
            log.exception("Grading job %s for %s failed", job.id, job.activity_id)
            with self._lock:
                self._forget(job)
            if fail is not None:
                fail(exc)
        finally:
            job.finished.set()

    def _forget(self, job: GradingJob) -> None:
        jobs = self.pending.get(job.sid, [])
        if job in jobs:
            jobs.remove(job)
        if not jobs:
            self.pending.pop(job.sid, None)

    def is_pending(self, sid: str, activity_id: str) -> bool:
        with self._lock:
            return any(j.activity_id == activity_id for j in self.pending.get(sid, []))

    def cancel(self, sid: str, activity_id: Optional[str] = None) -> int:
        """Cancel pending jobs for sid (optionally one activity). Returns how many."""
        with self._lock:
            jobs = self.pending.get(sid, [])
            doomed = [j for j in jobs if activity_id is None or j.activity_id == activity_id]
            for job in doomed:
                job.cancelled.set()
                jobs.remove(job)
            if not jobs:
                self.pending.pop(sid, None)
        if doomed:
            log.info("Cancelled %d grading job(s) for %s", len(doomed), sid)
        return len(doomed)


# ── Singleton ─────────────────────────────────────────────────────────────────

grading_desk = GradingDesk()


# ── Helpers ───────────────────────────────────────────────────────────────────

def _resolve(data, expected_type: str) -> Union[str, Tuple[str, dict, dict]]:
    """(path_id, module, activity) for a submission, or an error message."""
    if not isinstance(data, dict):
        return "Malformed submission."
    path_id = data.get("path_id", "")
    mod = get_module(path_id, data.get("module_id", ""))
    activity = next(
        (a for a in mod["activities"] if a["id"] == data.get("activity_id")), None
    ) if mod else None
    if not activity:
        return "Activity not found."
    if activity["type"] != expected_type:
        return f"Activity is not a {expected_type} activity."
    error = validate_activity(activity)
    if error:
        return error
    return path_id, mod, activity


def _schedule(path_id: str, mod: dict, activity: dict,
              delay: float, grade: Callable[[], str]) -> None:
    sid = request.sid
    if current_progress().is_activity_completed(activity["id"], mod["id"], path_id):
        emit("grading_rejected", {
            "activity_id": activity["id"],
            "message": "Activity already completed.",
        })
        return

    app = current_app._get_current_object()
    pid = profile_id()

    def deliver(feedback: str) -> None:
        with app.app_context():
            tracker = ProgressTracker.load(ProfileStorage(pid))
            result = finish_activity(tracker, path_id, mod, activity)
        socketio.emit("feedback_ready", {"feedback": feedback, **result}, to=sid)

    def fail(exc: Exception) -> None:
        socketio.emit("grading_failed", {
            "activity_id": activity["id"],
            "message": f"Could not review your submission: {exc}",
        }, to=sid)

    job = grading_desk.submit_unless_pending(sid, activity["id"], delay, grade, deliver, fail)
    if job is None:
        emit("grading_rejected", {
            "activity_id": activity["id"],
            "message": "This submission is already being reviewed.",
        })
        return
    emit("grading_started", {"activity_id": activity["id"], "delay": delay})


# ── SocketIO event handlers ───────────────────────────────────────────────────

@socketio.on("submit_open_text")
def handle_submit_open_text(data):
    target = _resolve(data, "open-text")
    if isinstance(target, str):
        emit("grading_rejected", {"message": target})
        return
    path_id, mod, activity = target

    words = count_words(data.get("response", ""))
    min_words = activity["data"].get("min_words", DEFAULT_MIN_WORDS)
    if words < min_words:
        emit("grading_rejected", {
            "activity_id": activity["id"],
            "message": f"{min_words - words} more words needed",
            "word_count": words,
            "min_words": min_words,
        })
        return

    _schedule(path_id, mod, activity,
              delay=current_app.config["OPEN_TEXT_GRADING_DELAY"],
              grade=lambda: open_text_feedback(words))


@socketio.on("submit_voice_recording")
def handle_submit_voice_recording(data):
    target = _resolve(data, "voice-recording")
    if isinstance(target, str):
        emit("grading_rejected", {"message": target})
        return
    path_id, mod, activity = target

    try:
        seconds = int(data.get("duration", 0))
    except (TypeError, ValueError):
        seconds = 0
    min_duration = activity["data"].get("min_duration", DEFAULT_MIN_DURATION)
    if seconds < min_duration:
        emit("grading_rejected", {
            "activity_id": activity["id"],
            "message": f"Record at least {min_duration} seconds",
            "duration": seconds,
            "min_duration": min_duration,
        })
        return

    _schedule(path_id, mod, activity,
              delay=current_app.config["VOICE_GRADING_DELAY"],
              grade=lambda: voice_feedback(seconds))


@socketio.on("leave_activity")
def handle_leave_activity(data):
    activity_id = data.get("activity_id") if isinstance(data, dict) else None
    grading_desk.cancel(request.sid, activity_id)


@socketio.on("disconnect")
def handle_disconnect(reason=None):
    grading_desk.cancel(request.sid)

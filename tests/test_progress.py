import pytest
from pathlib import Path
from nxshot.exceptions import InvalidTransitionError
from nxshot.models import FileEntry
from nxshot.progress import JobState, OrganizeJob


def _entries(n):
    return [FileEntry(Path(f"/album/{i}.jpg")) for i in range(n)]


def test_job_runs_forward_to_done():
    job = OrganizeJob(Path("/album"))
    assert job.state is JobState.IDLE

    job.begin_scan()
    job.set_candidates(_entries(2))
    assert job.state is JobState.READY
    assert job.cursor == 0
    assert job.status_message() == "2 files found"

    job.begin_organizing()
    job.advance()
    assert job.status_message() == "File 1 of 2"
    job.advance()
    assert job.state is JobState.DONE
    assert job.cursor == job.total == 2
    assert job.status_message() == "All files processed"


def test_observers_see_every_change():
    job = OrganizeJob()
    seen = []
    job.subscribe(lambda j: seen.append((j.state, j.cursor)))

    job.begin_scan()
    job.set_candidates(_entries(1))
    job.begin_organizing()
    job.advance()

    assert seen == [
        (JobState.SCANNING, 0),
        (JobState.READY, 0),
        (JobState.ORGANIZING, 0),
        (JobState.ORGANIZING, 1),
        (JobState.DONE, 1),
    ]


def test_states_are_never_revisited():
    job = OrganizeJob()
    job.begin_scan()
    job.set_candidates(_entries(1))

    with pytest.raises(InvalidTransitionError):
        job.begin_scan()

    job.begin_organizing()
    job.advance()
    with pytest.raises(InvalidTransitionError):
        job.advance()
    with pytest.raises(InvalidTransitionError):
        job.begin_organizing()


def test_cannot_advance_before_organizing():
    job = OrganizeJob()
    job.begin_scan()
    job.set_candidates(_entries(3))
    with pytest.raises(InvalidTransitionError):
        job.advance()


def test_empty_batch_finishes_explicitly():
    job = OrganizeJob()
    job.begin_scan()
    job.set_candidates([])
    job.begin_organizing()
    job.finish()
    assert job.is_done


def test_finish_refuses_pending_files():
    job = OrganizeJob()
    job.begin_scan()
    job.set_candidates(_entries(2))
    job.begin_organizing()
    job.advance()
    with pytest.raises(InvalidTransitionError):
        job.finish()


def test_failed_is_terminal():
    job = OrganizeJob()
    job.begin_scan()
    job.set_candidates(_entries(2))
    job.begin_organizing()
    job.fail()

    assert job.state is JobState.FAILED
    assert job.status_message() == "Failed after 0 of 2 files"
    with pytest.raises(InvalidTransitionError):
        job.advance()


def test_candidates_are_a_snapshot():
    job = OrganizeJob()
    job.begin_scan()
    entries = _entries(2)
    job.set_candidates(entries)
    entries.append(FileEntry(Path("/album/late.jpg")))
    assert job.total == 2
    assert isinstance(job.candidates, tuple)

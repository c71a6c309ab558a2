"""Unit tests for resume repositories and key-value stores."""

import pytest

from resume_builder.config import Settings
from resume_builder.contexts.application.exceptions import (
    ResumeNotFoundError,
    SerializationError,
    StorageErrorKind,
    StorageUnavailableError,
    StorageWriteError,
)
from resume_builder.contexts.domain.models import (
    Education,
    Experience,
    PersonalInfo,
    Resume,
    ResumeTheme,
)
from resume_builder.contexts.domain.sample_data import sample_resume
from resume_builder.contexts.infrastructure.key_value_store import (
    KeyValueStore,
    SQLiteKeyValueStore,
)
from resume_builder.contexts.infrastructure.storage import (
    InMemoryResumeRepository,
    KeyValueResumeRepository,
    create_repository,
)


class DictStore(KeyValueStore):
    def __init__(self):
        self.items = {}

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, value):
        self.items[key] = value


class OfflineStore(KeyValueStore):
    def get_item(self, key):
        raise StorageUnavailableError("storage disabled")

    def set_item(self, key, value):
        raise StorageWriteError("quota exceeded", key)


class TestInMemoryResumeRepository:
    """Tests for the ephemeral repository."""

    @pytest.mark.unit
    def test_empty_repository(self):
        repository = InMemoryResumeRepository()

        assert not repository.exists()
        with pytest.raises(ResumeNotFoundError) as exc_info:
            repository.load()
        assert exc_info.value.kind is StorageErrorKind.NOT_FOUND

    @pytest.mark.unit
    def test_save_then_load(self):
        repository = InMemoryResumeRepository()
        resume = sample_resume()

        repository.save(resume)

        assert repository.exists()
        assert repository.load() == resume

    @pytest.mark.unit
    def test_snapshot_isolated_from_caller_edits(self):
        repository = InMemoryResumeRepository()
        resume = sample_resume()
        repository.save(resume)

        resume.education.append(Education(institution="Later Edit"))
        loaded = repository.load()
        loaded.theme = ResumeTheme.MODERN

        assert repository.load() == sample_resume()

    @pytest.mark.unit
    def test_resave_overwrites(self):
        repository = InMemoryResumeRepository()
        repository.save(sample_resume())
        repository.save(Resume())

        assert repository.load() == Resume()


class TestKeyValueResumeRepository:
    """Tests for the key-value backed repository."""

    @pytest.mark.unit
    def test_save_writes_yaml_under_fixed_key(self):
        store = DictStore()
        repository = KeyValueResumeRepository(store, "my-resume")

        repository.save(sample_resume())

        assert list(store.items) == ["my-resume"]
        assert "personal_info:" in store.items["my-resume"]

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["${", "Helm values ${{ secrets.TOKEN }}", "\\${x}"])
    def test_interpolation_like_text_survives_save_and_load(self, tmp_path, text):
        """Test that text OmegaConf would parse as an interpolation is stored verbatim."""
        repository = KeyValueResumeRepository(SQLiteKeyValueStore(tmp_path / "store.sqlite3"))
        resume = Resume(
            personal_info=PersonalInfo(name=text),
            experience=[Experience(company="Acme", description=text, achievements=[text])],
        )

        repository.save(resume)

        assert repository.load() == resume

    @pytest.mark.unit
    def test_default_key(self):
        store = DictStore()
        KeyValueResumeRepository(store).save(Resume())

        assert "resume-data" in store.items

    @pytest.mark.unit
    def test_exists_reflects_last_save(self):
        repository = KeyValueResumeRepository(DictStore())

        assert not repository.exists()
        repository.save(Resume())
        assert repository.exists()

    @pytest.mark.unit
    def test_load_missing_raises_not_found(self):
        with pytest.raises(ResumeNotFoundError):
            KeyValueResumeRepository(DictStore()).load()

    @pytest.mark.unit
    def test_idempotent_resave(self):
        store = DictStore()
        repository = KeyValueResumeRepository(store)
        repository.save(sample_resume())
        first = dict(store.items)

        repository.save(sample_resume())

        assert store.items == first
        assert repository.load() == sample_resume()

    @pytest.mark.unit
    def test_corrupt_snapshot_raises_serialization_error(self):
        store = DictStore()
        store.items["resume-data"] = "resume:\n  theme: Baroque\n"

        with pytest.raises(SerializationError):
            KeyValueResumeRepository(store).load()

    @pytest.mark.unit
    def test_exists_never_raises(self):
        assert KeyValueResumeRepository(OfflineStore()).exists() is False

    @pytest.mark.unit
    def test_write_failure_surfaces_as_storage_error(self):
        with pytest.raises(StorageWriteError) as exc_info:
            KeyValueResumeRepository(OfflineStore()).save(Resume())

        assert exc_info.value.kind is StorageErrorKind.WRITE_FAILURE


class TestSQLiteKeyValueStore:
    """Tests for the durable key-value store."""

    @pytest.mark.unit
    def test_missing_key(self, tmp_path):
        store = SQLiteKeyValueStore(tmp_path / "store.sqlite3")

        assert store.get_item("resume-data") is None

    @pytest.mark.unit
    def test_set_overwrites(self, tmp_path):
        store = SQLiteKeyValueStore(tmp_path / "nested" / "store.sqlite3")

        store.set_item("resume-data", "first")
        store.set_item("resume-data", "second")

        assert store.get_item("resume-data") == "second"

    @pytest.mark.unit
    def test_values_visible_to_new_store_instance(self, tmp_path):
        db_path = tmp_path / "store.sqlite3"
        SQLiteKeyValueStore(db_path).set_item("k", "v")

        assert SQLiteKeyValueStore(db_path).get_item("k") == "v"

    @pytest.mark.unit
    def test_unopenable_path_is_unavailable(self, tmp_path):
        # A directory cannot be opened as a database file
        db_path = tmp_path / "store.sqlite3"
        db_path.mkdir()

        with pytest.raises(StorageUnavailableError):
            SQLiteKeyValueStore(db_path).get_item("k")


class TestCreateRepository:
    """Tests for backend selection."""

    @pytest.mark.unit
    def test_memory_backend(self):
        repository = create_repository(Settings(storage_backend="memory"))

        assert isinstance(repository, InMemoryResumeRepository)

    @pytest.mark.unit
    def test_sqlite_backend(self, tmp_path):
        settings = Settings(storage_path=tmp_path / "store.sqlite3", storage_key="slot")

        repository = create_repository(settings)

        assert isinstance(repository, KeyValueResumeRepository)
        assert isinstance(repository.store, SQLiteKeyValueStore)
        assert repository.storage_key == "slot"

    @pytest.mark.unit
    def test_unknown_backend_rejected_by_settings(self):
        with pytest.raises(ValueError, match="Invalid storage backend"):
            Settings(storage_backend="cloud")

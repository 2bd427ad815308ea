from unittest.mock import MagicMock, call

import pytest

from exceptions import RequirementAlreadyExistsException, ResourceNotFoundException
from mappers import requirement_mapper
from models.requirement import Requirement, RequirementDto, RequirementListDto
from services.requirement_service import DELETE_ALL_KEY, RequirementService


@pytest.fixture()
def mapper() -> MagicMock:
    return MagicMock(spec=requirement_mapper)


@pytest.fixture()
def service(repo, mapper) -> RequirementService:
    return RequirementService(repo=repo, mapper=mapper)


def _copy_to_dto(entity, dto):
    dto.title = entity.title
    dto.description = entity.description
    return dto


class TestCreateRequirement:
    def test_returns_uuid_of_saved_requirement(self, service, repo, mapper, requirement_dto, requirement):
        repo.find_by_title.return_value = None
        repo.save.return_value = requirement
        mapper.map_to_requirement.return_value = requirement

        result = service.create_requirement(requirement_dto)

        assert result == "test-uuid"
        repo.find_by_title.assert_called_once_with("Test Requirement")
        repo.save.assert_called_once_with(requirement)
        repo.flush.assert_called_once()

    def test_maps_dto_onto_fresh_entity(self, service, repo, mapper, requirement_dto, requirement):
        repo.find_by_title.return_value = None
        repo.save.return_value = requirement
        mapper.map_to_requirement.return_value = requirement

        service.create_requirement(requirement_dto)

        dto_arg, target = mapper.map_to_requirement.call_args.args
        assert dto_arg is requirement_dto
        assert isinstance(target, Requirement)
        assert target.req_id is None

    def test_existing_title_raises_without_writing(self, service, repo, requirement_dto, requirement):
        repo.find_by_title.return_value = requirement

        with pytest.raises(RequirementAlreadyExistsException) as exc_info:
            service.create_requirement(requirement_dto)

        assert exc_info.value.title == "Test Requirement"
        repo.save.assert_not_called()
        repo.save_and_flush.assert_not_called()
        repo.flush.assert_not_called()


class TestFetchRequirement:
    def test_returns_mapped_dto(self, service, repo, mapper, requirement):
        repo.find_by_uuid.return_value = requirement
        mapper.map_to_requirement_dto.side_effect = _copy_to_dto

        result = service.fetch_requirement("test-uuid")

        assert isinstance(result, RequirementDto)
        assert result.title == requirement.title
        assert result.description == requirement.description
        repo.find_by_uuid.assert_called_once_with("test-uuid")

    def test_unknown_uuid_raises_not_found(self, service, repo):
        repo.find_by_uuid.return_value = None

        with pytest.raises(ResourceNotFoundException) as exc_info:
            service.fetch_requirement("unknown-uuid")

        assert exc_info.value.field_name == "uuid"
        assert exc_info.value.field_value == "unknown-uuid"


class TestUpdateRequirement:
    def test_returns_true_and_saves_with_flush(self, service, repo, mapper, requirement_dto, requirement):
        repo.find_by_uuid.return_value = requirement
        repo.save_and_flush.return_value = requirement
        mapper.map_to_requirement.return_value = requirement

        assert service.update_requirement("test-uuid", requirement_dto) is True

        mapper.map_to_requirement.assert_called_once_with(requirement_dto, requirement)
        repo.save_and_flush.assert_called_once_with(requirement)
        repo.save.assert_not_called()

    def test_does_not_check_title_uniqueness(self, service, repo, requirement_dto, requirement):
        repo.find_by_uuid.return_value = requirement

        service.update_requirement("test-uuid", requirement_dto)

        repo.find_by_title.assert_not_called()

    def test_unknown_uuid_raises_without_writing(self, service, repo, mapper, requirement_dto):
        repo.find_by_uuid.return_value = None

        with pytest.raises(ResourceNotFoundException):
            service.update_requirement("test-uuid", requirement_dto)

        repo.save_and_flush.assert_not_called()
        mapper.map_to_requirement.assert_not_called()


class TestDeleteRequirement:
    def test_deletes_by_internal_id(self, service, repo, requirement):
        repo.find_by_uuid.return_value = requirement

        assert service.delete_requirement("test-uuid") is True

        repo.delete_by_req_id.assert_called_once_with(1)
        repo.flush.assert_called_once()

    def test_unknown_uuid_raises_without_deleting(self, service, repo):
        repo.find_by_uuid.return_value = None

        with pytest.raises(ResourceNotFoundException):
            service.delete_requirement("test-uuid")

        repo.delete_by_req_id.assert_not_called()
        repo.flush.assert_not_called()


class TestDeleteAllRequirements:
    def test_valid_key_deletes_then_flushes(self, service, repo):
        assert service.delete_all_requirements("akaj3971y1aksjda") is True

        repo.delete_all.assert_called_once()
        repo.flush.assert_called_once()
        assert repo.mock_calls == [call.delete_all(), call.flush()]

    def test_invalid_key_returns_false_and_touches_nothing(self, service, repo):
        assert service.delete_all_requirements("invalid-key") is False

        assert repo.mock_calls == []

    def test_empty_key_is_rejected(self, service, repo):
        assert service.delete_all_requirements("") is False
        repo.delete_all.assert_not_called()

    def test_key_constant(self):
        assert DELETE_ALL_KEY == "akaj3971y1aksjda"


class TestGetAllRequirements:
    def test_maps_every_entity_in_order(self, service, repo, mapper, requirement):
        second = Requirement(uuid="other", req_id=2, title="Second", description="More")
        repo.find_all.return_value = [requirement, second]
        mapper.map_to_requirement_dto.side_effect = _copy_to_dto

        result = service.get_all_requirements()

        assert isinstance(result, RequirementListDto)
        assert [d.title for d in result.requirements] == ["Test Requirement", "Second"]
        assert mapper.map_to_requirement_dto.call_count == 2

    def test_empty_store_returns_empty_list(self, service, repo, mapper):
        repo.find_all.return_value = []

        result = service.get_all_requirements()

        assert result is not None
        assert result.requirements == []
        mapper.map_to_requirement_dto.assert_not_called()


class TestDefaultCollaborators:
    def test_uses_mapper_module_by_default(self, repo, requirement):
        repo.find_by_uuid.return_value = requirement

        dto = RequirementService(repo=repo).fetch_requirement("test-uuid")

        assert dto == RequirementDto(title="Test Requirement", description="Test Description")

    def test_create_then_duplicate_scenario(self, repo, requirement_dto):
        stored: dict[str, Requirement] = {}
        repo.find_by_title.side_effect = lambda title: stored.get(title)

        def _save(entity):
            entity.req_id = len(stored) + 1
            stored[entity.title] = entity
            return entity

        repo.save.side_effect = _save
        service = RequirementService(repo=repo)

        uuid = service.create_requirement(requirement_dto)
        assert stored["Test Requirement"].uuid == uuid
        assert len(stored) == 1

        with pytest.raises(RequirementAlreadyExistsException):
            service.create_requirement(requirement_dto)
        assert repo.save.call_count == 1

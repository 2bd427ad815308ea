"""
services/requirement_service.py
-------------------------------
Business logic for managing requirements.
Orchestrates between the RequirementRepository and the requirement mapper.
"""

from exceptions import RequirementAlreadyExistsException, ResourceNotFoundException
from mappers import requirement_mapper
from models.requirement import Requirement, RequirementDto, RequirementListDto
from repositories.requirement_repo import RequirementRepository
from utils.logger import get_logger

logger = get_logger(__name__)

# Static key guarding delete_all_requirements. Plain equality, nothing more.
DELETE_ALL_KEY = "akaj3971y1aksjda"


class RequirementService:
    """
    Handles all business logic related to requirements.

    Both collaborators can be injected:
        repo: Anything exposing the RequirementRepository methods.
        mapper: Anything exposing `map_to_requirement` and
            `map_to_requirement_dto` (defaults to the mapper module).

    Not-found and duplicate conditions raise; only a rejected
    delete-all key is reported as False.
    """

    def __init__(self, repo=None, mapper=None):
        self.repo = repo if repo is not None else RequirementRepository()
        self.mapper = mapper if mapper is not None else requirement_mapper

    def create_requirement(self, dto: RequirementDto) -> str:
        """
        Store a new requirement.

        Returns:
            The uuid of the new requirement.

        Raises:
            RequirementAlreadyExistsException: A requirement with this title exists.
        """
        if self.repo.find_by_title(dto.title) is not None:
            raise RequirementAlreadyExistsException(dto.title)

        requirement = self.mapper.map_to_requirement(dto, Requirement())
        saved = self.repo.save(requirement)
        self.repo.flush()
        logger.info(f"Created requirement '{saved.title}' ({saved.uuid})")
        return saved.uuid

    def fetch_requirement(self, uuid: str) -> RequirementDto:
        """Raises ResourceNotFoundException for an unknown uuid."""
        requirement = self._get_or_raise(uuid)
        return self.mapper.map_to_requirement_dto(requirement, RequirementDto())

    def update_requirement(self, uuid: str, dto: RequirementDto) -> bool:
        """
        Replace title and description of an existing requirement.
        Titles are not checked for uniqueness here.
        """
        requirement = self._get_or_raise(uuid)
        self.mapper.map_to_requirement(dto, requirement)
        self.repo.save_and_flush(requirement)
        logger.info(f"Updated requirement {uuid}")
        return True

    def delete_requirement(self, uuid: str) -> bool:
        requirement = self._get_or_raise(uuid)
        self.repo.delete_by_req_id(requirement.req_id)
        self.repo.flush()
        logger.info(f"Deleted requirement {uuid} (#{requirement.req_id})")
        return True

    def delete_all_requirements(self, key: str) -> bool:
        """
        Wipe every requirement when `key` matches DELETE_ALL_KEY.

        Returns:
            False (and touches nothing) on a wrong key, True once deleted.
        """
        if key != DELETE_ALL_KEY:
            logger.warning("Rejected delete-all request: wrong key")
            return False

        self.repo.delete_all()
        self.repo.flush()
        logger.warning("All requirements deleted")
        return True

    def get_all_requirements(self) -> RequirementListDto:
        requirements = self.repo.find_all()
        return RequirementListDto(
            requirements=[
                self.mapper.map_to_requirement_dto(r, RequirementDto()) for r in requirements
            ]
        )

    def _get_or_raise(self, uuid: str) -> Requirement:
        requirement = self.repo.find_by_uuid(uuid)
        if requirement is None:
            raise ResourceNotFoundException("Requirement", "uuid", uuid)
        return requirement

"""
mappers/requirement_mapper.py
-----------------------------
Copies title and description between Requirement and RequirementDto.
Identifiers (uuid, req_id) are never touched.
"""

from models.requirement import Requirement, RequirementDto


def map_to_requirement(dto: RequirementDto, requirement: Requirement) -> Requirement:
    """Apply the dto's fields onto `requirement` and return it."""
    requirement.title = dto.title
    requirement.description = dto.description
    return requirement


def map_to_requirement_dto(requirement: Requirement, dto: RequirementDto) -> RequirementDto:
    """Fill `dto` from the entity and return it."""
    dto.title = requirement.title
    dto.description = requirement.description
    return dto

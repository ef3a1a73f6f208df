"""
Sample catalog loaded into an empty store at startup (SEED_SAMPLE_DATA=true).
"""

from typing import Tuple

from edulibrary.schemas.resource import Category, ResourceCreate, SkillLevel

SAMPLE_RESOURCES: Tuple[ResourceCreate, ...] = (
    ResourceCreate(
        title="Python for Absolute Beginners",
        description=(
            "A gentle, project-based introduction to Python covering variables, "
            "control flow, functions and working with files."
        ),
        category=Category.PROGRAMMING,
        skill_level=SkillLevel.BEGINNER,
        image_url="https://images.unsplash.com/photo-1526379095098-d400fd0bf935",
        resource_type="Video Course",
        video_url="https://www.youtube.com/watch?v=rfscVS0vtbw",
    ),
    ResourceCreate(
        title="Practical Statistics for Data Scientists",
        description=(
            "Core statistical concepts every data scientist needs: sampling, "
            "distributions, regression and significance testing, with worked examples."
        ),
        category=Category.DATA_SCIENCE,
        skill_level=SkillLevel.INTERMEDIATE,
        image_url="https://images.unsplash.com/photo-1551288049-bebda4e38f71",
        resource_type="eBook",
    ),
    ResourceCreate(
        title="Design Systems in Practice",
        description=(
            "How to build, document and maintain a component-based design system "
            "that scales across product teams."
        ),
        category=Category.DESIGN,
        skill_level=SkillLevel.ADVANCED,
        image_url="https://images.unsplash.com/photo-1561070791-2526d30994b5",
        resource_type="Video Course",
        video_url="https://vimeo.com/76979871",
    ),
    ResourceCreate(
        title="Linear Algebra Refresher",
        description=(
            "Vectors, matrices, eigenvalues and decompositions explained with "
            "geometric intuition and short exercises."
        ),
        category=Category.MATHEMATICS,
        skill_level=SkillLevel.INTERMEDIATE,
        image_url="https://images.unsplash.com/photo-1635070041078-e363dbe005cb",
        resource_type="Interactive Course",
        video_url="https://youtu.be/fNk_zzaMoSs",
    ),
    ResourceCreate(
        title="Spanish Conversation Starter Kit",
        description=(
            "Everyday phrases, pronunciation drills and short dialogues to start "
            "speaking Spanish with confidence."
        ),
        category=Category.LANGUAGES,
        skill_level=SkillLevel.BEGINNER,
        image_url="https://images.unsplash.com/photo-1543783207-ec64e4d95325",
        resource_type="Audio Course",
    ),
)

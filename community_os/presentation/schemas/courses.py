from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import Field, StrictInt

from community_os.presentation.schemas.base import (
    BoundedText,
    RequestSchema,
    RequiredId,
    WebUrl,
)

CourseTitle = BoundedText("Title", 3, 200)
CourseDescription = BoundedText("Description", 10, 5000)


class CreateCourseSchema(RequestSchema):
    community_id: RequiredId("Community ID")
    title: CourseTitle
    description: CourseDescription
    payment_tier_id: Optional[RequiredId("Payment tier ID")] = None


class UpdateCourseSchema(RequestSchema):
    title: Optional[CourseTitle] = None
    description: Optional[CourseDescription] = None


class CreateLessonSchema(RequestSchema):
    title: BoundedText("Title", 3, 200)
    content: str = ""
    type: Literal["TEXT", "VIDEO_EMBED", "PDF"]
    video_url: Optional[WebUrl("Video URL")] = None
    pdf_url: Optional[str] = None
    order: Optional[Annotated[StrictInt, Field(ge=0)]] = None
    drip_available_at: Optional[datetime] = None


class UpdateLessonSchema(RequestSchema):
    title: Optional[BoundedText("Title", 3, 200)] = None
    content: Optional[str] = None
    video_url: Optional[WebUrl("Video URL")] = None
    pdf_url: Optional[str] = None


class ReorderLessonSchema(RequestSchema):
    order: StrictInt = Field(ge=0)


class SetDripScheduleSchema(RequestSchema):
    available_at: Optional[datetime] = None


class LessonProgressSchema(RequestSchema):
    lesson_id: RequiredId("Lesson ID")

import datetime
from typing import Annotated, Optional
from annotated_types import Ge, Le
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, model_validator

# ---------- Reusable type aliases ----------
ClassNameStr = Annotated[str, StringConstraints(min_length=1, max_length=100)]
PositiveInt = Annotated[int, Ge(1)]
# signed 64-bit range of the id columns
LONG_MIN = -2**63
LONG_MAX = 2**63 - 1
LongInt = Annotated[int, Ge(LONG_MIN), Le(LONG_MAX)]


# name and date stay optional here; the booking workflow reports them as rule failures
class BookingCreate(BaseModel):
   name: Optional[str] = None
   date: Optional[datetime.date] = None
   class_id: Optional[LongInt] = Field(default=None, validation_alias=AliasChoices("classId", "class_id"))


class BookingRead(BaseModel):
   name: str
   date: datetime.date
   class_id: int = Field(
      validation_alias=AliasChoices("classId", "class_id"),
      serialization_alias="classId",
   )

   model_config = ConfigDict(from_attributes=True)


class ClassCreate(BaseModel):
   name: ClassNameStr
   start_date: datetime.date = Field(validation_alias=AliasChoices("startDate", "start_date"))
   end_date: datetime.date = Field(validation_alias=AliasChoices("endDate", "end_date"))

   @model_validator(mode="after")
   def check_range(self):
      if self.end_date < self.start_date:
         raise ValueError("endDate must not be before startDate")
      return self


class ClassRead(BaseModel):
   id: PositiveInt
   name: str
   start_date: datetime.date = Field(
      validation_alias=AliasChoices("startDate", "start_date"),
      serialization_alias="startDate",
   )
   end_date: datetime.date = Field(
      validation_alias=AliasChoices("endDate", "end_date"),
      serialization_alias="endDate",
   )

   model_config = ConfigDict(from_attributes=True)

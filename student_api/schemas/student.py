from pydantic import BaseModel, ConfigDict, Field


MAX_AGE = 2**63 - 1  # largest value BSON can store as int64


class StudentBase(BaseModel):
    # strict: "25" or 25.0 for age is a malformed body, not a coercible value
    name: str = Field(..., min_length=1, strict=True)
    age: int = Field(..., ge=1, le=MAX_AGE, strict=True)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    pass


class StudentInDB(StudentBase):
    id: str

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass

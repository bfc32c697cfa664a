from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.collection import Collection


def to_object_id(student_id: str) -> Optional[ObjectId]:
    """ObjectId for a path identifier, or None when it can't be one."""
    if not ObjectId.is_valid(student_id):
        return None
    return ObjectId(student_id)


def document_to_student(document: Dict[str, Any]) -> Dict[str, Any]:
    """Rename Mongo's `_id` to `id` and render it as a string."""
    return {
        "id": str(document["_id"]),
        "name": document.get("name"),
        "age": document.get("age"),
    }


class StudentRepository:
    """
    Student documents in a MongoDB collection.

    Holds one Collection for its whole life; pymongo collections are
    thread-safe, so a single repository serves every request.
    Identifiers are ObjectIds stored in `_id` and exposed as hex strings.
    Any pymongo error propagates to the caller.
    """

    def __init__(self, collection: Collection):
        self._collection = collection

    @property
    def collection(self) -> Collection:
        return self._collection

    def insert(self, document: Dict[str, Any]) -> str:
        # copy: insert_one writes the generated _id into the dict it is given
        result = self._collection.insert_one(dict(document))
        return str(result.inserted_id)

    def find_one(self, student_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(student_id)
        if object_id is None:
            return None
        document = self._collection.find_one({"_id": object_id})
        if document is None:
            return None
        return document_to_student(document)

    def update_fields(self, student_id: str, fields: Dict[str, Any]) -> int:
        object_id = to_object_id(student_id)
        if object_id is None:
            return 0
        fields = {k: v for k, v in fields.items() if k not in ("id", "_id")}
        result = self._collection.update_one({"_id": object_id}, {"$set": fields})
        return result.modified_count

    def delete(self, student_id: str) -> int:
        object_id = to_object_id(student_id)
        if object_id is None:
            return 0
        result = self._collection.delete_one({"_id": object_id})
        return result.deleted_count

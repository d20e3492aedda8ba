# models/student.py
from datetime import datetime
from mongoengine import (
    Document, StringField, DateField, IntField, SequenceField,
    BooleanField, DateTimeField
)


class Student(Document):
    # Public integer id used by the API
    user_id = SequenceField(unique=True)

    # Basic details
    name = StringField(required=True)
    email = StringField(required=True, unique=True)  # format checked at the API edge
    gender = StringField(choices=["Male", "Female", "Other"])
    date_of_birth = DateField()
    phone_number = StringField(max_length=15)

    # Class placement
    class_name = StringField()
    section = StringField()
    roll = StringField()

    # Other details
    address = StringField()
    guardian_name = StringField()
    guardian_contact = StringField(max_length=15)

    # Status
    is_active = BooleanField(default=True)
    status_reviewed_by = IntField()
    status_changed_at = DateTimeField()
    date_joined = DateTimeField(default=datetime.utcnow)

    meta = {
        "collection": "students",
        "indexes": [
            "class_name",
        ],
        "ordering": ["user_id"]
    }

    def __str__(self):
        return f"{self.user_id} - {self.name}"

    def to_json(self):
        return {
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
            "gender": self.gender,
            "dateOfBirth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "phone": self.phone_number,
            "className": self.class_name,
            "section": self.section,
            "roll": self.roll,
            "address": self.address,
            "guardianName": self.guardian_name,
            "guardianContact": self.guardian_contact,
            "isActive": self.is_active,
            "statusReviewedBy": self.status_reviewed_by,
            "statusChangedAt": self.status_changed_at.isoformat() if self.status_changed_at else None,
            "dateJoined": self.date_joined.isoformat() if self.date_joined else None
        }

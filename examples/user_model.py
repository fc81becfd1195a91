"""Example document model."""

from spark_schema_generator.document_model import Date, Number, ObjectId, Schema, String, model

pet = Schema({"kind": String, "born": Date}, _id=False)

user_schema = Schema(
    {
        "name": String,
        "age": {"type": Number, "default": 0, "enum": [0, 18, 21]},
        "tags": [String],
        "address": {"city": String, "zip": String},
        "pets": [pet],
        "owner": {"type": ObjectId, "required": True},
    }
)
user_schema.virtual("fullName")

user = model("User", user_schema)

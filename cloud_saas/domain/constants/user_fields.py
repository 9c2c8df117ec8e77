"""Constants for User document field names"""


class UserFields:
    """
    Field name constants for the users collection.

    Document keys stay camelCase so records written by earlier versions of
    the site remain readable.
    """
    ID = "id"
    FULL_NAME = "fullName"
    EMAIL = "email"
    COUNTRY = "country"
    HASHED_PASSWORD = "password"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

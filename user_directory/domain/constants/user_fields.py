"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents and wire payloads"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    USERNAME = "username"
    EMAIL = "email"
    FOLLOWERS = "followers"
    FULL_NAME = "fullName"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

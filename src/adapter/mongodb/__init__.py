USERS_COLLECTION_NAME = 'users'
MESSAGES_COLLECTION_NAME = 'messages'

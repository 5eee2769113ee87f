"""User-facing response messages.

Kept verbatim (Ukrainian) so existing API clients keep matching on them.
"""

SEED_SUCCESS = "Початкові дані успішно додані."
SEED_FAILED = "Помилка при додаванні початкових даних."

USER_NOT_FOUND = "Користувач не знайдено."
PRODUCT_NOT_FOUND = "Продукт не знайдено."
ORDER_NOT_FOUND = "Замовлення не знайдено."

ORDER_CREATED = "Замовлення успішно створено."
ORDER_CREATE_FAILED = "Помилка при створенні замовлення."
ORDER_DETAILS_FAILED = "Помилка при отриманні даних замовлення."

PRODUCT_CREATE_FAILED = "Помилка при створенні продукту."
PRODUCT_LIST_FAILED = "Помилка при отриманні списку продуктів."
PRODUCT_UPDATE_FAILED = "Помилка при оновленні продукту."
PRODUCT_DELETE_FAILED = "Помилка при видаленні продукту."
PRODUCT_STATISTICS_FAILED = "Помилка при виконанні агрегаційного запиту."

INVALID_REQUEST = "Некоректний запит."
INTERNAL_ERROR = "Внутрішня помилка сервера."

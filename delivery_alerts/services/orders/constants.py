"""Wire keys and fixed values of the orders API."""

ORDER_ID_KEY = "OrderId"
ITEMS_KEY = "Items"

STATUS_KEY = "Status"
DESCRIPTION_KEY = "Description"
NOTIFICATION_COUNT_KEY = "deliveryNotification"

DELIVERED_STATUS = "Delivered"

ALERT_MESSAGE_TEMPLATE = (
    "Alert for delivered item: Order {order_id}, Item: {description}, "
    "Delivery Notifications: {count}"
)

SERVICE_NAME = "appy"

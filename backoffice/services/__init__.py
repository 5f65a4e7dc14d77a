"""Domain logic shared by the API routers"""

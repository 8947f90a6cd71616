"""Request validation and response payload builders."""

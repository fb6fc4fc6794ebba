"""Resource record types and how to read each from the wire."""
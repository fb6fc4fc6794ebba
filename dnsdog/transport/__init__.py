"""Ways of sending encoded DNS messages to a nameserver."""
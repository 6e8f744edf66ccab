"""Order lifecycle shared by the classic and the hypermedia apps."""

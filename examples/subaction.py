from actionkit import ActionResponse, Cookie


def widget() -> ActionResponse:
	res = ActionResponse()
	res.setContentType("text/html")
	res.setContent("<p>Hello from the widget</p>")
	res.setCookie(Cookie("widget", "seen"))
	res.addHeader("Vary", "Cookie")
	return res


def page() -> ActionResponse:
	res = ActionResponse()
	res.setStatusCode(200)
	res.setPublic()
	res.setMaxAge(60)
	# The widget is rendered as a sub-action, its response overrides ours
	return widget().mergeInto(res)


if __name__ == "__main__":
	print(page().build().asBytes().decode("utf8"))

# EOF

"""Sample command: writes an illustrative Go file with placeholders."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

logger = logging.getLogger("swaggervars.cli.sample")

DEFAULT_SAMPLE_NAME = "sample.go"

SAMPLE_SOURCE = '''package main

import (
	"net/http"

	"github.com/gin-gonic/gin"
)

// HTTP status codes used in the API documentation
const (
	StatusSuccess      = 200
	StatusCreated      = 201
	StatusBadRequest   = 400
	StatusUnauthorized = 401
	StatusNotFound     = 404
	StatusServerError  = 500
)

// Response messages
const (
	MessageSuccess    = "Operation completed successfully"
	MessageCreated    = "Resource created successfully"
	MessageBadRequest = "Invalid request parameters"
	MessageNotFound   = "Resource not found"
)

// API version and defaults
var APIVersion = "v1"

var (
	DefaultPageSize = 20
	RateLimit       = 2.5
	PagingEnabled   = true
)

const UsersDescription = `Retrieve all users from the system.
Results are paginated.`

type User struct {
	ID   int    `json:"id"`
	Name string `json:"name"`
}

type ErrorResponse struct {
	Error string `json:"error"`
}

// GetUsers godoc
// @Summary Get all users
// @Description {{UsersDescription}}
// @Tags users
// @Accept json
// @Produce json
// @Param limit query int false "Page size (default {{DefaultPageSize}}, paging enabled: {{PagingEnabled}})"
// @Success {{StatusSuccess}} {object} User "{{MessageSuccess}}"
// @Failure {{StatusBadRequest}} {object} ErrorResponse "{{MessageBadRequest}}"
// @Failure {{StatusNotFound}} {object} ErrorResponse "{{MessageNotFound}}"
// @Failure {{StatusServerError}} {object} ErrorResponse "Server error"
// @Router /api/{{APIVersion}}/users [get]
func GetUsers(c *gin.Context) {
	c.JSON(http.StatusOK, gin.H{"users": []User{}})
}

// CreateUser godoc
// Alternative placeholder syntaxes:
// @Description Rate limited to ${RateLimit} requests per second
// @Success ${StatusCreated} {object} User "${MessageCreated}"
// @Success @VAR(StatusSuccess) {object} User "@VAR(MessageSuccess)"
// @Router /api/@VAR(APIVersion)/users [post]
func CreateUser(c *gin.Context) {
	c.JSON(StatusCreated, gin.H{"message": MessageCreated})
}
'''


def create_sample_file(output: Optional[Path] = None) -> Path:
    """Write SAMPLE_SOURCE to ``output`` (default: ./sample.go).

    Raises:
        OSError: If the file cannot be written.
    """
    target = Path(output) if output else Path(DEFAULT_SAMPLE_NAME)
    target.write_text(SAMPLE_SOURCE, encoding="utf-8")
    logger.debug("Sample written to %s", target)
    return target


def sample_command(args, console: Optional[Console] = None) -> int:
    """Execute sample command.

    Args:
        args: Parsed command-line arguments.
        console: Console for user-facing output (optional).

    Returns:
        int: Exit code.
    """
    console = console or Console(highlight=False)
    try:
        target = create_sample_file(getattr(args, "output", None))
    except OSError as e:
        logger.error("Failed to create sample file: %s", e)
        return 1
    console.print(f"Created {target}", markup=False, emoji=False, soft_wrap=True)
    return 0
